#!/usr/bin/env python3
"""
Startup script for the Jan Seva Scheme Finder backend
"""
import subprocess
import sys
from pathlib import Path

ENV_TEMPLATE = """# MongoDB Configuration
MONGODB_URL=mongodb://localhost:27017
MONGODB_DB_NAME=janseva_db
SCHEMES_COLLECTION=schemes
SCHOLARSHIPS_COLLECTION=scholarships
USERS_COLLECTION=users

# Application Configuration
APP_NAME=Jan Seva Scheme Finder
APP_VERSION=1.0.0
DEBUG=true
LOG_LEVEL=INFO

# API Configuration
CORS_ORIGINS=http://localhost:3000,http://localhost:8080

# Security
ADMIN_API_KEY=change_this_admin_key
USER_ID_HEADER=X-User-Id
"""


def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if env_path.exists():
        print("✅ .env file already exists")
        return

    print("📝 Creating .env file...")
    env_path.write_text(ENV_TEMPLATE)
    print("✅ .env file created successfully!")
    print("⚠️  Please set ADMIN_API_KEY in .env before using the admin routes")


def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi  # noqa: F401
        import motor  # noqa: F401
        import pydantic_settings  # noqa: F401
        import uvicorn  # noqa: F401
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .[test]")
        return False


def start_mongodb():
    """Start a MongoDB container with Docker"""
    print("🐳 Starting MongoDB...")

    try:
        result = subprocess.run(['docker', 'run', '-d', '--name', 'janseva-mongo', '-p', '27017:27017', 'mongo:7'], capture_output=True, text=True)
        if result.returncode == 0:
            print("✅ MongoDB started successfully")
            return True
        print(f"❌ Failed to start MongoDB: {result.stderr}")
        return False

    except FileNotFoundError:
        print("❌ Docker not found. Please install Docker.")
        return False


def run_tests():
    """Run the pytest suite"""
    print("🧪 Running tests...")

    result = subprocess.run([sys.executable, '-m', 'pytest', '-q'], capture_output=True, text=True)
    if result.returncode == 0:
        print("✅ Tests passed successfully")
        return True
    print(f"❌ Tests failed:\n{result.stdout[-2000:]}")
    return False


def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'janseva.main:app',
            '--host', '0.0.0.0',
            '--port', '8000',
            '--reload'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")


def main():
    """Main startup function"""
    print("🏛️  Jan Seva Scheme Finder")
    print("=" * 50)

    if not Path("janseva").exists():
        print("❌ Please run this script from the repository root")
        sys.exit(1)

    create_env_file()

    if not check_dependencies():
        sys.exit(1)

    if not start_mongodb():
        print("\n⚠️  MongoDB startup failed. You can still run the application")
        print("   if MongoDB is running elsewhere.")

    if not run_tests():
        print("\n⚠️  Some tests failed. The application may not work correctly.")

    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Set ADMIN_API_KEY in .env")
    print("2. Visit http://localhost:8000/docs for API documentation")
    print("3. Add schemes and scholarships through /admin/programs")
    print("4. Save a profile with PUT /profile/me and check /eligibility/me")

    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn janseva.main:app --reload")


if __name__ == "__main__":
    main()
