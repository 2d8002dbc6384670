"""
Verify the Firebase setup
Run this after setting up Firebase to check if everything is configured correctly
"""
import json
import os
import socket
import sys
from dotenv import load_dotenv

def check_environment():
    """Check if environment variables are set"""
    print("Checking environment variables...")
    load_dotenv()

    if os.getenv('FIREBASE_CREDENTIALS_JSON'):
        print("  ✅ FIREBASE_CREDENTIALS_JSON is set")
    elif os.getenv('FIREBASE_CREDENTIALS_PATH'):
        print(f"  ✅ FIREBASE_CREDENTIALS_PATH = {os.getenv('FIREBASE_CREDENTIALS_PATH')}")
    else:
        print("  ❌ Neither FIREBASE_CREDENTIALS_JSON nor FIREBASE_CREDENTIALS_PATH is set")
        return False

    print(f"  ✅ FIREBASE_PROJECT_ID = {os.getenv('FIREBASE_PROJECT_ID', 'philly-wings')}")
    return True

def check_credentials_file():
    """Check if the Firebase credentials are a valid service account"""
    print("\nChecking Firebase credentials...")
    load_dotenv()

    creds_json = os.getenv('FIREBASE_CREDENTIALS_JSON')
    cred_path = os.getenv('FIREBASE_CREDENTIALS_PATH', 'firebase-credentials.json')

    try:
        if creds_json:
            cred_data = json.loads(creds_json)
        elif os.path.exists(cred_path):
            print(f"  ✅ Credentials file found: {cred_path}")
            with open(cred_path, 'r') as f:
                cred_data = json.load(f)
        else:
            print(f"  ❌ Credentials file not found: {cred_path}")
            print("     Download a service account key from the Firebase Console")
            return False
    except json.JSONDecodeError:
        print("  ❌ Credentials are not valid JSON")
        return False

    required_keys = ['type', 'project_id', 'private_key_id', 'private_key', 'client_email']
    missing_keys = [key for key in required_keys if key not in cred_data]

    if missing_keys:
        print(f"  ⚠️  Missing keys in credentials: {', '.join(missing_keys)}")
        return False

    print("  ✅ Credentials are valid")
    print(f"  ✅ Project ID: {cred_data.get('project_id', 'N/A')}")
    return True

def check_emulator():
    """Check if the Firestore emulator is reachable"""
    print("\nChecking Firestore emulator...")
    load_dotenv()

    host = os.getenv('FIRESTORE_EMULATOR_ADDRESS', 'localhost:8080')
    hostname, _, port = host.rpartition(':')
    try:
        with socket.create_connection((hostname or 'localhost', int(port)), timeout=2):
            print(f"  ✅ Emulator listening on {host}")
            return True
    except (OSError, ValueError) as e:
        print(f"  ⚠️  Emulator not reachable on {host}: {e}")
        print("     Start it with: firebase emulators:start --only firestore")
        return False

def check_firebase_connection():
    """Check the production Firebase connection"""
    print("\nChecking Firebase connection...")

    try:
        from config import Config
        from firebase_service import init_firestore
        firebase = init_firestore(Config)
        print(f"  ✅ Firebase connection successful ({len(firebase.list_collections())} collections)")
        return True
    except FileNotFoundError as e:
        print(f"  ❌ {str(e)}")
        return False
    except Exception as e:
        print(f"  ❌ Firebase connection failed: {str(e)}")
        return False

def check_dependencies():
    """Check if required dependencies are installed"""
    print("\nChecking dependencies...")

    required_packages = [
        'flask',
        'flask_cors',
        'firebase_admin',
        'dotenv',
        'pydantic'
    ]

    missing = []
    for package in required_packages:
        try:
            __import__(package.replace('-', '_'))
            print(f"  ✅ {package} installed")
        except ImportError:
            missing.append(package)
            print(f"  ❌ {package} not installed")

    if missing:
        print(f"\n⚠️  Missing packages: {', '.join(missing)}")
        print("   Run: pip install -e .")
        return False

    return True

def main():
    """Run all checks"""
    print("=" * 50)
    print("Firebase Setup Verification")
    print("=" * 50)

    results = []

    results.append(("Dependencies", check_dependencies()))
    results.append(("Environment Variables", check_environment()))
    results.append(("Credentials", check_credentials_file()))

    # Only try to connect when the previous checks passed
    if all([r[1] for r in results]):
        results.append(("Firebase Connection", check_firebase_connection()))

    # The emulator is optional
    emulator_ok = check_emulator()

    print("\n" + "=" * 50)
    print("Summary")
    print("=" * 50)

    for name, result in results:
        status = "✅ PASS" if result else "❌ FAIL"
        print(f"{name}: {status}")
    print(f"Emulator: {'✅ RUNNING' if emulator_ok else '⏭️  NOT RUNNING'}")

    all_passed = all([r[1] for r in results])

    if all_passed:
        print("\n🎉 All checks passed! Your setup is correct.")
        return 0
    else:
        print("\n⚠️  Some checks failed. Please check the errors above.")
        return 1

if __name__ == '__main__':
    sys.exit(main())
