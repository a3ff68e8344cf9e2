import os
from dotenv import load_dotenv

load_dotenv()

# Contract lookup - loaded from .env
RPC_URL = os.getenv("RPC_URL", "https://rpc2.sepolia.org")
CONTRACT_ADDRESS = os.getenv("CONTRACT_ADDRESS", "0x11773cEbb30eD3803cB050D62734C4a9Db3a1251")
RPC_TIMEOUT = float(os.getenv("RPC_TIMEOUT", "10"))

# Assets: local directory holding full/, or an http(s) base URL
ASSETS_BASE = os.getenv("ASSETS_BASE", ".")
ASSET_TIMEOUT = float(os.getenv("ASSET_TIMEOUT", "10"))
LAYER_WORKERS = int(os.getenv("LAYER_WORKERS", "9"))

# Metadata
IMAGE_URL_TEMPLATE = os.getenv("IMAGE_URL_TEMPLATE", "https://customsv2.onrender.com/Image?Id={token_id}")

# Server
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
