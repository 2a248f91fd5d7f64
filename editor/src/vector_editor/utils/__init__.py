"""Utility modules: logging, configuration, coordinate mapping, transform math"""
