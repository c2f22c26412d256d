"""Pharmaceutical research product API"""
