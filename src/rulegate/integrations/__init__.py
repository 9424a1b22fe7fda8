"""
Host framework adapters. Importing rulegate never imports a framework; each
adapter module imports its own.
"""
