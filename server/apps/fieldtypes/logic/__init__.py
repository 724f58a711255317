"""Field type logic for fieldtypes app.

This package contains the binary field types and the operations
built on them:
- Value normalization, completion and structure checks
- Validation of values and of field definition configuration
- Hash and persistence conversion
- Field definition and field value operations

Keep Django models thin, put field type behaviour here.
"""
