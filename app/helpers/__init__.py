"""
Small SQL helpers shared by the data-access layer.
"""
