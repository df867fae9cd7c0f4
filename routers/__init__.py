# routers/__init__.py
from . import assets, auth, bills, buildings, guests, rooms, stats, students, users

all_routers = [
     auth.router,
     buildings.router,
     rooms.router,
     students.router,
     guests.router,
     assets.router,
     bills.router,
     users.router,
     stats.router,
]
