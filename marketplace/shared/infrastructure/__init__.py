# 📄 File: marketplace/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plumbing that connects the marketplace to its database.
# 🧪 Purpose (Technical Summary):
# Shared infrastructure package; see the database subpackage for engine, sessions,
# declarative base and the generic repository.
# 🔗 Dependencies:
# database/
# 🔄 Connected Modules / Calls From:
# Module infrastructure layers, migrations, tests
