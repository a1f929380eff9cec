"""Tests for the multisets package

The behaviour of multisets is specified via tests. Each multisets
module has an associated test module. The suite can be run with

    python -m multisets.tests

or with any test runner that collects unittest test cases.
"""
