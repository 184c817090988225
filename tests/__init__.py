"""
Only the root tests/ directory carries an __init__.py; subdirectories work as
namespace packages (PEP 420). Keep test module basenames unique across the tree.
"""
