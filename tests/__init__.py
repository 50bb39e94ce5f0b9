"""Test package for the rag-kb parser"""
