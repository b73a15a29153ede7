#!/usr/bin/env python3
"""Task runner for the SCIM identity management plugin"""

import sys
import subprocess
import argparse


def run_server():
    """Start the development server"""
    print("Starting SCIM identity management plugin...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "scim_plugin.main:app",
            "--host", "0.0.0.0",
            "--port", "8000",
            "--reload"
        ], check=True)
    except KeyboardInterrupt:
        print("\nServer stopped")
    except subprocess.CalledProcessError as e:
        print(f"Failed to start server: {e}")
        sys.exit(1)


def run_tests():
    """Run the test suite"""
    print("Running tests...")
    result = subprocess.run([
        sys.executable, "-m", "pytest",
        "tests/",
        "-v",
        "--tb=short"
    ], check=False)
    if result.returncode == 0:
        print("All tests passed")
    else:
        print("Some tests failed")
        sys.exit(1)


def install_deps():
    """Install the package with test dependencies"""
    print("Installing dependencies...")
    try:
        subprocess.run([
            sys.executable, "-m", "pip", "install",
            "-e", ".[test]"
        ], check=True)
        print("Dependencies installed")
    except subprocess.CalledProcessError as e:
        print(f"Failed to install dependencies: {e}")
        sys.exit(1)


def lint_code():
    """Check the code with linters"""
    print("Checking code...")

    # Black
    print("  Formatting with Black...")
    try:
        subprocess.run([
            sys.executable, "-m", "black",
            "scim_plugin/", "tests/", "--check"
        ], check=True)
        print("  Black: code is formatted")
    except subprocess.CalledProcessError:
        print("  Black: formatting required")
        subprocess.run([
            sys.executable, "-m", "black",
            "scim_plugin/", "tests/"
        ])
        print("  Black: code formatted")

    # Flake8
    print("  Checking with Flake8...")
    try:
        subprocess.run([
            sys.executable, "-m", "flake8",
            "scim_plugin/", "tests/"
        ], check=True)
        print("  Flake8: no problems found")
    except subprocess.CalledProcessError:
        print("  Flake8: problems found")


def main():
    """Entry point"""
    parser = argparse.ArgumentParser(description="SCIM identity management plugin tasks")
    parser.add_argument(
        "command",
        choices=["server", "test", "install", "lint"],
        help="Command to run"
    )

    args = parser.parse_args()

    if args.command == "server":
        run_server()
    elif args.command == "test":
        run_tests()
    elif args.command == "install":
        install_deps()
    elif args.command == "lint":
        lint_code()


if __name__ == "__main__":
    main()
