"""
Core of the validation rule engine: models, patterns, validators and rules.
"""
