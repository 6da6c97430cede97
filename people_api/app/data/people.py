"""Static list used to seed the in-memory people store.

Birth dates are day-first strings (``dd/mm/yyyy``).
"""

PEOPLE = [
    {
        "id": "5763cd4dc378a38ecd387737",
        "firstname": "Leanne",
        "lastname": "Aguilar",
        "birthDate": "22/09/1963",
        "photo": "https://randomuser.me/api/portraits/women/59.jpg",
    },
    {
        "id": "5763cd4d9d2a4f259b53c901",
        "firstname": "Castaneda",
        "lastname": "Salinas",
        "birthDate": "08/12/1987",
        "photo": "https://randomuser.me/api/portraits/men/0.jpg",
    },
    {
        "id": "5763cd4d3b57c672861bfa1f",
        "firstname": "Phyllis",
        "lastname": "Mcleod",
        "birthDate": "12/05/1979",
        "photo": "https://randomuser.me/api/portraits/women/13.jpg",
    },
    {
        "id": "5763cd4d4b1f5a3e0f7e8d22",
        "firstname": "Erika",
        "lastname": "Guzman",
        "birthDate": "02/03/1992",
        "photo": "https://randomuser.me/api/portraits/women/22.jpg",
    },
    {
        "id": "5763cd4e2c6b4ab3e0a1b5f0",
        "firstname": "Walker",
        "lastname": "Santos",
        "birthDate": "30/07/1975",
        "photo": "https://randomuser.me/api/portraits/men/41.jpg",
    },
]
