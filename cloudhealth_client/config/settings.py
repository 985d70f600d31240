import os
from dotenv import load_dotenv, find_dotenv

# Load environment variables from the nearest .env file
load_dotenv(find_dotenv(usecwd=True))

# CloudHealth settings
CLOUDHEALTH_BASE_URL = os.getenv("CLOUDHEALTH_BASE_URL", "https://chapi.cloudhealthtech.com/v1/")
CLOUDHEALTH_API_KEY = os.getenv("CLOUDHEALTH_API_KEY")

# Request timeout in seconds
REQUEST_TIMEOUT = float(os.getenv("CLOUDHEALTH_REQUEST_TIMEOUT", 15))

# AWS account listing pagination
AWS_ACCOUNTS_PAGE_SIZE = 100
AWS_ACCOUNTS_FIRST_PAGE = 1
