"""Shared library code for slugren"""
