"""
Core package: settings, configuration loading, logging and the exception taxonomy.
"""
