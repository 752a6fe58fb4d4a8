"""Cache adapters"""
