"""Service layer — wraps domain rules in the ServiceResult contract."""
