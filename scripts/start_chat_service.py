#!/usr/bin/env python3
"""
Startup script for the Stor-a-gentic chat service
Runs the FastAPI app with uvicorn after checking the environment
"""

import os
import sys
import logging
import argparse
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv(project_root / ".env")


def setup_logging(log_level: str = "INFO"):
    """Set up logging configuration."""
    logs_dir = project_root / "logs"
    logs_dir.mkdir(exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(logs_dir / "chat_service.log")
        ]
    )


def check_environment():
    """Report which optional integrations are configured"""
    if os.getenv("SUPABASE_URL") and os.getenv("SUPABASE_ANON_KEY"):
        print("✅ Supabase credentials set")
    else:
        print("⚠️  SUPABASE_URL / SUPABASE_ANON_KEY not set")
        print("   Service will start with built-in data; inquiries and bookings will not be stored")

    if os.getenv("GROQ_API_KEY"):
        print("✅ Completion API key set")
    else:
        print("ℹ️  GROQ_API_KEY not set, unmatched questions get rule-based replies")

    supabase_url = os.getenv("SUPABASE_URL", "")
    if supabase_url and not supabase_url.startswith("https://"):
        print(f"⚠️  SUPABASE_URL should start with https:// (current: {supabase_url})")


def start_chat_service(host: str = "0.0.0.0", port: int = 5001, reload: bool = False):
    """Start the chat service"""
    try:
        import uvicorn

        print(f"🚀 Starting Stor-a-gentic chat service on {host}:{port}")
        print(f"💬 Chat endpoint: http://{host}:{port}/chat")
        print(f"📊 Health check: http://{host}:{port}/health")

        uvicorn.run(
            "storagentic.services.chat_service:app",
            host=host,
            port=port,
            reload=reload,
            log_level="info"
        )

    except ImportError as e:
        print(f"❌ Failed to import required modules: {e}")
        print("Make sure dependencies are installed: pip install -e .")
        sys.exit(1)


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Start the Stor-a-gentic chat service")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", 5001)), help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"), help="Log level")
    parser.add_argument("--check-only", action="store_true", help="Only check the environment and exit")

    args = parser.parse_args()

    setup_logging(args.log_level)

    print("📦 Stor-a-gentic Chat Service Startup")
    print("=" * 40)

    print("🔧 Checking environment...")
    check_environment()

    if args.check_only:
        return

    start_chat_service(
        host=args.host,
        port=args.port,
        reload=args.reload
    )


if __name__ == "__main__":
    main()
