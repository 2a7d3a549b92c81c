"""Development startup script for the MedSky FastAPI application."""

import uvicorn
import sys
import os
from pathlib import Path

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


def main():
    """Main entry point for development server."""
    print("=" * 60)
    print("🚀 Starting MedSky (Development Mode)")
    print("=" * 60)
    print()
    print("📚 Interactive API Documentation:")
    print("   Swagger UI: http://localhost:5001/api/docs")
    print("   ReDoc:      http://localhost:5001/api/redoc")
    print()
    print("🔧 API Endpoints:")
    print("   POST /api/v1/auth/signin     - Sign in")
    print("   POST /api/v1/cases/generate  - Generate a case study")
    print("   GET  /api/v1/cases           - List case studies")
    print("   GET  /health                 - Health check")
    print()
    print("=" * 60)
    print()

    env_file = Path(__file__).parent / ".env"
    if env_file.exists():
        print(f"✅ Using environment file: {env_file}")
    else:
        print(f"⚠️  Environment file not found: {env_file}")
        print("   Using system environment variables only")

    uvicorn.run(
        "medsky.api.app:app",
        host="0.0.0.0",
        port=5001,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
