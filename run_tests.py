#!/usr/bin/env python3
"""
Main test runner for dacomp.

Runs a quick smoke check of the lex/parse/evaluate pipeline, then the
unit tests under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_checks() -> bool:
    """Push a few lines through the whole pipeline and report."""

    print("🚀 dacomp Test Suite")
    print("=" * 60)

    try:
        from dacomp.lexer.lexer import Lexer
        from dacomp.parser.parser import Parser
        from dacomp.evaluator.evaluator import Evaluator
        from dacomp.tools.tree_printer import format_tree

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import dacomp modules: {e}")
        return False

    print("Testing simple pipeline...")
    code = "(2 + 3) * 4 - 10 / 3"
    try:
        print("  🔧 Lexing...")
        tokens = list(Lexer(code))
        print(f"     Generated {len(tokens)} tokens")

        print("  🔧 Parsing...")
        tree = Parser(code).parse()
        if tree.has_errors():
            print(f"     ❌ Diagnostics: {len(tree.diagnostics)}")
            for diagnostic in tree.diagnostics:
                print(f"        {diagnostic}")
            return False
        print(format_tree(tree.root), end="")

        print("  🔧 Evaluating...")
        result = Evaluator(tree.root).evaluate()
        if result != 17:
            print(f"     ❌ Expected 17, got {result}")
            return False
        print(f"     ✅ {code} = {result}")

    except Exception as e:
        print(f"❌ Pipeline test FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False

    print("  ❌ Testing error handling...")
    tree = Parser("1 + @").parse()
    if len(tree.diagnostics) != 2:
        print(f"     ❌ Expected 2 diagnostics, got {tree.diagnostics}")
        return False
    print(f"     ✅ Error handling successful: caught {len(tree.diagnostics)} expected errors")
    print()

    return True


def run_all_tests() -> bool:
    if not run_pipeline_checks():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
