"""Test suite for the internship tracker."""
