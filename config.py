"""Configuration module for the token top-up processor."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Application settings
DEBUG = os.environ.get("DEBUG", "False").lower() in ["true", "1", "yes"]

# Input and output files
USERS_FILE = os.environ.get("USERS_FILE", "users.json")
COMPANIES_FILE = os.environ.get("COMPANIES_FILE", "companies.json")
OUTPUT_FILENAME = os.environ.get("OUTPUT_FILENAME", "output.txt")
LOGS_FOLDER = os.environ.get("LOGS_FOLDER", "logs")

# Report formatting
INDENT_SIZE = int(os.environ.get("INDENT_SIZE", "4"))
