import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    app_env: str = os.getenv("APP_ENV", "development")
    host: str = os.getenv("APP_HOST", "0.0.0.0")
    port: int = os.getenv("APP_PORT", 8000)

    # Kagi
    kagi_api_key: str = os.getenv("KAGI_API_KEY", "")
    kagi_base_url: Optional[str] = os.getenv("KAGI_BASE_URL", None)
    kagi_timeout: Optional[float] = os.getenv("KAGI_TIMEOUT", None)  # seconds
    kagi_check_on_startup: bool = os.getenv("KAGI_CHECK_ON_STARTUP", "false").lower() in (
        "1",
        "true",
        "yes",
    )

    # MCP server
    mcp_server_name: str = os.getenv("MCP_SERVER_NAME", "kagi-server")
    mcp_server_version: str = os.getenv("MCP_SERVER_VERSION", "0.1.0")
    mcp_transport: str = os.getenv("MCP_TRANSPORT", "stdio").lower()


settings = Settings()
