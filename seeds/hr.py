"""Seed definitions for benefits & employees.
Single source of truth for scripts/seed.py and the test fixtures.
"""

BENEFITS = [
    {'name': 'Medical Leave'},
    {'name': 'Family Leave'},
]

# date_of_birth is stored as naive UTC
EMPLOYEES = [
    {
        'first_name': 'Jane',
        'last_name': 'Smith',
        'date_of_birth': '2014-09-08T13:02:17',
        'secret': 'jane-secret',
    },
    {
        'first_name': 'John',
        'last_name': 'Smith',
        'date_of_birth': '1997-09-08T13:02:17',
        'secret': 'john-secret',
    },
]
