# 📄 File: marketplace/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Core building blocks shared by every module: the error types and the password/token hashing tools.
# 🧪 Purpose (Technical Summary):
# Package initialization for the exception hierarchy and security primitives.
# 🔗 Dependencies:
# exceptions.py, security.py
# 🔄 Connected Modules / Calls From:
# Domain entities, repositories, services
