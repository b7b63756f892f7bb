"""
Test package root.

Only this directory carries an __init__.py; the subdirectories under tests/unit mirror the
package layout of `money_operation` as namespace directories, so test module names must stay
unique across the tree.
"""
