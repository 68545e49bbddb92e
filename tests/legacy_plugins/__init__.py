"""Plugin package whose modules depend on packages that are not installed"""
