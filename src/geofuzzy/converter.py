import numpy as np
import pandas as pd
from .utils import extract_column
from .location_record import LocationRecord

_FRAME_COLUMNS = ['kind', 'name', 'state', 'country', 'latitude', 'longitude', 'region', 'currency', 'iso2', 'iso3']

def _to_float(value):
	if value is None or value == '':
		return np.nan
	try:
		return float(value)
	except (TypeError, ValueError):
		return np.nan

class LocationDataConverter:
	"""
	Converts index records to the nested dataset shape and to pandas DataFrames.

	Methods:
		format_result: Wraps a record in its country/state/city chain
		extract_path: Recovers kind and ancestor names from a formatted result
		results_to_frame: Flattens formatted results into a DataFrame
		index_to_frame: Flattens index records into a DataFrame
	"""
	@staticmethod
	def _country_wrapper(record: LocationRecord, name):
		return {
			'name': name,
			'region': record.region,
			'currency': record.currency_code,
			'currency_name': record.currency_name,
			'currency_symbol': record.currency_symbol,
			'phone_code': record.phone_code,
			'country_code': {
				'iso2': record.iso2,
				'iso3': record.iso3,
			},
		}

	@staticmethod
	def format_result(record: LocationRecord):
		"""
		Converts a matched record back into the nested dataset shape.

		A country formats as a top-level country object. A state is wrapped in
		its country with a single-element 'states' list, a city additionally
		sits in a single-element 'cities' list of its state. Siblings are
		never included.

		Parameters:
			record (LocationRecord): Matched index entry

		Returns:
			dict: Country-shaped result
		"""
		coords = {'latitude': record.latitude, 'longitude': record.longitude}
		if record.kind == 'country':
			result = LocationDataConverter._country_wrapper(record, record.name)
			return {'name': result.pop('name'), **coords, **result}

		result = LocationDataConverter._country_wrapper(record, record.country_name)
		if record.kind == 'state':
			result['states'] = [{'name': record.name, **coords}]
		else:
			result['states'] = [{
				'name': record.state_name,
				'cities': [{'name': record.name, **coords}],
			}]
		return result

	@staticmethod
	def extract_path(result):
		"""
		Recovers the kind and the ancestor name chain of a formatted result.

		Returns:
			tuple: (kind, [country, state, city]) with the chain as deep as the kind
		"""
		path = [result.get('name')]
		states = result.get('states') or []
		if not states:
			return 'country', path
		state = states[0]
		path.append(state.get('name'))
		cities = state.get('cities') or []
		if not cities:
			return 'state', path
		path.append(cities[0].get('name'))
		return 'city', path

	@staticmethod
	def _leaf(result):
		states = result.get('states') or []
		if not states:
			return result
		cities = states[0].get('cities') or []
		return cities[0] if cities else states[0]

	@staticmethod
	def results_to_frame(results):
		"""
		Flattens formatted search results into a pandas DataFrame.

		Parameters:
			results (list): Formatted results as returned by a search

		Returns:
			pandas.DataFrame: One row per result, coordinates as floats (NaN if missing)
		"""
		if not results:
			return pd.DataFrame(columns=_FRAME_COLUMNS)

		rows = []
		for result in results:
			kind, path = LocationDataConverter.extract_path(result)
			leaf = LocationDataConverter._leaf(result)
			codes = result.get('country_code') or {}
			rows.append({
				'kind': kind,
				'name': path[-1],
				'state': path[1] if kind == 'city' else None,
				'country': path[0] if kind != 'country' else None,
				'latitude': leaf.get('latitude'),
				'longitude': leaf.get('longitude'),
				'region': result.get('region'),
				'currency': result.get('currency'),
				'iso2': codes.get('iso2'),
				'iso3': codes.get('iso3'),
			})
		return LocationDataConverter._frame(rows)

	@staticmethod
	def index_to_frame(records):
		if not records:
			return pd.DataFrame(columns=_FRAME_COLUMNS)
		rows = [record.to_dict() for record in records]
		for row in rows:
			row['currency'] = row.pop('currency_code')
		return LocationDataConverter._frame(rows)

	@staticmethod
	def _frame(rows):
		df_data = {column: extract_column(rows, column) for column in _FRAME_COLUMNS}
		df_data['latitude'] = np.array(extract_column(rows, 'latitude', f=_to_float), dtype=float)
		df_data['longitude'] = np.array(extract_column(rows, 'longitude', f=_to_float), dtype=float)
		return pd.DataFrame(df_data, columns=_FRAME_COLUMNS)
