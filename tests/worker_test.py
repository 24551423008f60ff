import asyncio
import pytest
from geofuzzy import LocationSearch, SearchWorker

TIMEOUT = 5

def test_post_requires_running_worker():
    worker = SearchWorker()
    with pytest.raises(RuntimeError):
        worker.get_filters()

def test_search_before_init():
    with SearchWorker() as worker:
        response = worker.search('paris').result(timeout=TIMEOUT)
    assert response == {'type': 'ERROR', 'payload': 'Search index not initialized'}

def test_init_and_search(dataset):
    with SearchWorker() as worker:
        assert worker.is_running
        assert worker.init(None).result(timeout=TIMEOUT)['type'] == 'ERROR'
        assert worker.init(dataset).result(timeout=TIMEOUT) == {'type': 'READY'}

        response = worker.search('Paris').result(timeout=TIMEOUT)
        assert response['type'] == 'RESULTS'
        assert response['payload']['query'] == 'Paris'
        assert response['payload']['results'][0]['states'][0]['cities'][0]['name'] == 'Paris'

        filters = worker.get_filters().result(timeout=TIMEOUT)
        assert filters['type'] == 'FILTERS'
    assert not worker.is_running

def test_requests_are_answered_in_order(dataset):
    with SearchWorker() as worker:
        worker.init(dataset)
        futures = [worker.search(query, max_results=1) for query in ('par', 'pari', 'paris')]
        responses = [future.result(timeout=TIMEOUT) for future in futures]
    assert [r['payload']['query'] for r in responses] == ['par', 'pari', 'paris']

def test_stale_responses(dataset):
    with SearchWorker() as worker:
        worker.init(dataset)
        stale = worker.search('geo')
        latest = worker.search('georgia')
        assert not worker.is_current(stale.result(timeout=TIMEOUT))
        assert worker.is_current(latest.result(timeout=TIMEOUT))
        assert not worker.is_current({'type': 'READY'})

def test_asearch(dataset):
    async def run(worker):
        return await worker.asearch('texas')

    engine = LocationSearch()
    engine.load(dataset)
    with SearchWorker(engine) as worker:
        response = asyncio.run(run(worker))
    assert response['type'] == 'RESULTS'
    assert response['payload']['results'][0]['states'][0]['name'] == 'Texas'

if __name__ == "__main__":
    pytest.main()
