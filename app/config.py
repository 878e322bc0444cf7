import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase project (service role key bypasses RLS; never ship it to the frontend)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated; "*" allows any origin
CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]

# Number of generation errors shown before collapsing the rest into a summary line
GENERATION_ERROR_DISPLAY_LIMIT = int(os.getenv("GENERATION_ERROR_DISPLAY_LIMIT", "5"))
