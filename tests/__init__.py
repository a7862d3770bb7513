"""Test suite for convergence."""
