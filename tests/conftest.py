import pytest
from geofuzzy import LocationSearch, create_search_index


def _dataset():
    return [
        {
            'name': 'France', 'iso2': 'FR', 'iso3': 'FRA', 'region': 'Europe',
            'currency': 'EUR', 'currency_name': 'Euro', 'currency_symbol': '€',
            'phone_code': '33', 'latitude': '46.00000000', 'longitude': '2.00000000',
            'states': [
                {
                    'name': 'Île-de-France', 'latitude': '48.84991080', 'longitude': '2.63704110',
                    'cities': [
                        {'name': 'Paris', 'latitude': '48.85', 'longitude': '2.35'},
                        {'name': 'Versailles', 'latitude': '48.80', 'longitude': '2.13'},
                    ],
                },
                {
                    'name': "Provence-Alpes-Côte-d'Azur",
                    'cities': [
                        {'name': 'Marseille', 'latitude': '43.30', 'longitude': '5.37'},
                        {'name': 'Nice', 'latitude': '43.70', 'longitude': '7.27'},
                    ],
                },
            ],
        },
        {
            'name': 'Georgia', 'iso2': 'GE', 'iso3': 'GEO', 'region': 'Asia',
            'currency': 'GEL', 'currency_name': 'Georgian lari', 'currency_symbol': 'ლ',
            'phone_code': '995', 'latitude': '42.00', 'longitude': '43.50',
            'states': [
                {'name': 'Tbilisi', 'cities': [{'name': 'Tbilisi', 'latitude': '41.69', 'longitude': '44.83'}]},
            ],
        },
        {
            'name': 'United States', 'iso2': 'US', 'iso3': 'USA', 'region': 'Americas',
            'currency': 'USD', 'currency_name': 'United States dollar', 'currency_symbol': '$',
            'phone_code': '1', 'latitude': '38.00', 'longitude': '-97.00',
            'states': [
                {'name': 'Georgia', 'cities': [{'name': 'Atlanta', 'latitude': '33.75', 'longitude': '-84.39'}]},
                {'name': 'Texas', 'cities': [
                    {'name': 'Paris', 'latitude': '33.66', 'longitude': '-95.56'},
                    {'name': 'Austin', 'latitude': '30.27', 'longitude': '-97.74'},
                ]},
                {'name': 'Vermont', 'cities': [{'name': 'Georgia', 'latitude': '44.73', 'longitude': '-73.12'}]},
                {'name': 'California', 'cities': [
                    {'name': 'Los Angeles', 'latitude': '34.05', 'longitude': '-118.24'},
                    {'name': 'San Francisco', 'latitude': '37.77', 'longitude': '-122.42'},
                ]},
            ],
        },
    ]


@pytest.fixture
def dataset():
    return _dataset()


@pytest.fixture
def index(dataset):
    return create_search_index(dataset)


@pytest.fixture
def engine(dataset):
    engine = LocationSearch()
    engine.load(dataset)
    return engine
