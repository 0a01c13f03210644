# 📄 File: marketplace/modules/cinema/__init__.py
# 🧭 Purpose (Layman Explanation):
# Cinemas, the movies they play, their show times and the tickets people buy.
#
# 🧪 Purpose (Technical Summary):
# Cinema bounded context: venue/screen/seat layout, movie catalogue, show seat counters and BMS tickets.
#
# 🔗 Dependencies:
# - cinema.domain, cinema.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - finance (payments, refunds), reviews

"""
Cinema Module

Cinemas, screens, seats, movies, shows and movie tickets.
"""
