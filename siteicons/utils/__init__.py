"""Utilities for siteicons"""
