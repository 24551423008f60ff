from .utils import tokenize, clean_name

_METADATA_FIELDS = ('region', 'currency_code', 'currency_name', 'currency_symbol', 'phone_code', 'iso2', 'iso3')

class LocationRecord:
    """
    A single flattened entry of the location index.

    Records come in three kinds (see CountryRecord, StateRecord and CityRecord).
    Every record carries the metadata of the country it belongs to, copied
    down when the index is built.

    Parameters:
        name (str): Display name of the location
        latitude (str or float): Latitude as found in the dataset
        longitude (str or float): Longitude as found in the dataset
        region (str): Region of the owning country (e.g., 'Europe')
        currency_code (str): ISO currency code of the owning country
        currency_name (str): Currency name
        currency_symbol (str): Currency symbol
        phone_code (str): International dialing code
        iso2 (str): ISO 3166-1 alpha-2 code of the owning country
        iso3 (str): ISO 3166-1 alpha-3 code of the owning country

    Note:
        Records are built once per index and must not be modified afterwards.
    """
    kind = None
    parent_tokens = ()

    def __init__(self, name, latitude=None, longitude=None, region=None, currency_code=None,
                 currency_name=None, currency_symbol=None, phone_code=None, iso2=None, iso3=None):
        self.name = name
        self.search_name = name.lower()
        self.name_tokens = tuple(tokenize(name))
        self.latitude = latitude
        self.longitude = longitude
        self.region = region
        self.currency_code = currency_code
        self.currency_name = currency_name
        self.currency_symbol = currency_symbol
        self.phone_code = phone_code
        self.iso2 = iso2
        self.iso3 = iso3

    @property
    def country_metadata(self) -> dict:
        """Metadata shared by the owning country and all of its descendants."""
        return {field: getattr(self, field) for field in _METADATA_FIELDS}

    def is_within(self, parent_name: str) -> bool:
        """Checks whether the record lies inside the named (lowercase) parent."""
        return False

    @property
    def ancestors(self) -> list:
        return []

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'name': self.name,
            'state': None,
            'country': None,
            'latitude': self.latitude,
            'longitude': self.longitude,
            **self.country_metadata,
        }

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r}, ancestors={self.ancestors!r}, iso2={self.iso2!r})"

    def __str__(self):
        s =    'Kind     : {}'.format(self.kind)
        s += '\nName     : {}'.format(self.name)
        s += '\nIn       : {}'.format(', '.join(self.ancestors)) if self.ancestors else ''
        s += '\nRegion   : {}'.format(self.region) if self.region else ''
        s += '\nCurrency : {}'.format(self.currency_code) if self.currency_code else ''
        if self.latitude is not None and self.longitude is not None:
            s += '\nCoords   : {}, {}'.format(self.latitude, self.longitude)
        return s


class CountryRecord(LocationRecord):
    kind = 'country'

    @classmethod
    def from_api(cls, data):
        name = data.get('name')
        if clean_name(name) is None:
            raise ValueError("Country entry has no name")
        return cls(
            name=name,
            latitude=data.get('latitude'),
            longitude=data.get('longitude'),
            region=data.get('region'),
            currency_code=data.get('currency'),
            currency_name=data.get('currency_name'),
            currency_symbol=data.get('currency_symbol'),
            phone_code=data.get('phone_code') or data.get('phonecode'),
            iso2=data.get('iso2'),
            iso3=data.get('iso3'),
        )


class StateRecord(LocationRecord):
    kind = 'state'

    def __init__(self, name, country_name, **kwargs):
        super().__init__(name, **kwargs)
        self.country_name = country_name
        self.parent_tokens = tuple(tokenize(country_name))

    @classmethod
    def from_api(cls, data, country: CountryRecord):
        name = data.get('name')
        if clean_name(name) is None:
            raise ValueError(f"State entry in {country.name!r} has no name")
        return cls(
            name=name,
            country_name=country.name,
            latitude=data.get('latitude'),
            longitude=data.get('longitude'),
            **country.country_metadata
        )

    def is_within(self, parent_name: str) -> bool:
        return self.country_name.lower() == parent_name

    @property
    def ancestors(self) -> list:
        return [self.country_name]

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'country': self.country_name}


class CityRecord(LocationRecord):
    kind = 'city'

    def __init__(self, name, state_name, country_name, **kwargs):
        super().__init__(name, **kwargs)
        self.state_name = state_name
        self.country_name = country_name
        self.parent_tokens = tuple(tokenize(f'{state_name} {country_name}'))

    @classmethod
    def from_api(cls, data, state: StateRecord):
        name = data.get('name')
        if clean_name(name) is None:
            raise ValueError(f"City entry in {state.name!r} has no name")
        return cls(
            name=name,
            state_name=state.name,
            country_name=state.country_name,
            latitude=data.get('latitude'),
            longitude=data.get('longitude'),
            **state.country_metadata
        )

    def is_within(self, parent_name: str) -> bool:
        return self.state_name.lower() == parent_name or self.country_name.lower() == parent_name

    @property
    def ancestors(self) -> list:
        return [self.country_name, self.state_name]

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'state': self.state_name, 'country': self.country_name}
