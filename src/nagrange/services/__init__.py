"""Service layer: wraps domain operations in the ServiceResult contract."""
