import os

API_URL = os.getenv("API_URL", "http://localhost:3000")

APP_NAME = "Records Manager"

PAGE_SIZE = int(os.getenv("PAGE_SIZE", "10"))
