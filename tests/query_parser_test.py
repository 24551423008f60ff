import pytest
from geofuzzy.query_parser import FilterKey, Query, parse_query

def test_plain_keywords():
    query = parse_query('  New   York ')
    assert query.filters == {}
    assert query.keywords == ('new', 'york')
    assert query.search_text == 'new york'

def test_unquoted_filter():
    query = parse_query('iso2:US')
    assert query.filters == {'iso2': 'us'}
    assert query.keywords == ()
    assert not query.is_empty

def test_quoted_filter_anywhere():
    query = parse_query('california in:"United States"')
    assert query.filters == {'in': 'united states'}
    assert query.keywords == ('california',)
    assert parse_query('in:"United States" california') == query

def test_keys_are_case_folded():
    query = parse_query('Region:ASIA india')
    assert query.filters == {'region': 'asia'}
    assert query.known_filters == {FilterKey.REGION: 'asia'}
    assert query.keywords == ('india',)

def test_multiple_filters():
    query = parse_query('type:city region:"north america" spring')
    assert query.known_filters == {FilterKey.TYPE: 'city', FilterKey.REGION: 'north america'}
    assert query.keywords == ('spring',)

def test_repeated_key_keeps_last_value():
    assert parse_query('type:city type:state').filters == {'type': 'state'}

def test_unknown_keys_are_captured():
    query = parse_query('foo:bar paris')
    assert query.filters == {'foo': 'bar'}
    assert query.unknown_filters == {'foo': 'bar'}
    assert query.known_filters == {}
    assert query.keywords == ('paris',)

def test_empty_value_is_free_text():
    query = parse_query('iso2: paris')
    assert query.filters == {}
    assert query.keywords == ('iso2:', 'paris')

def test_unterminated_quote():
    query = parse_query('in:"united states')
    assert query.filters == {'in': 'united'}
    assert query.keywords == ('states',)

def test_colon_without_key_is_free_text():
    assert parse_query(':paris').keywords == (':paris',)

def test_filter_inside_token():
    query = parse_query('paris,iso2:FR')
    assert query.filters == {'iso2': 'fr'}
    assert query.keywords == ('paris,',)

def test_filter_after_punctuation():
    query = parse_query('ab-cd:ef gh')
    assert query.filters == {'cd': 'ef'}
    assert query.keywords == ('ab-', 'gh')
    assert parse_query('(in:"united states")').filters == {'in': 'united states'}

def test_colon_inside_word_is_not_split():
    query = parse_query('a-b: c')
    assert query.filters == {}
    assert query.keywords == ('a-b:', 'c')

def test_empty_query():
    assert parse_query('').is_empty
    assert parse_query(None).is_empty
    assert parse_query('   ') == Query()

if __name__ == "__main__":
    pytest.main()
