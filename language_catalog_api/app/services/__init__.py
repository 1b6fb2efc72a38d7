"""
Service layer abstraction.

Services encapsulate the query logic over the dataset so that API
handlers stay thin.
"""
