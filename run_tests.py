#!/usr/bin/env python3
"""
Main test runner for the Lox tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_check():
    """Scan a small program end to end before running the suites."""
    print("Testing scanner on a sample program...")
    try:
        from lox.lexer import scan

        code = """
        fun add(a, b) {
            return a + b;
        }

        var result = add(5, 10);
        print result;
        """
        result = scan(code, "<smoke>")
        print(f"  🔧 Generated {len(result.tokens)} tokens")
        if result.has_errors():
            for error in result.errors:
                print(f"  ❌ {error}")
            return False
        print("  ✅ Scanned without errors")
        return True

    except ImportError as e:
        print(f"❌ Failed to import lox: {e}")
        return False


def run_all_tests():
    """Discover and run everything under tests/."""
    print("🚀 Lox Test Suite")
    print("=" * 60)

    if not run_smoke_check():
        return False
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print("\n" + "=" * 60)
    if result.wasSuccessful():
        print("✅ All tests passed!")
    else:
        print("❌ Some tests failed.")
        print(f"Failures: {len(result.failures)}")
        print(f"Errors: {len(result.errors)}")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
