"""
Testes do WeatherStore (cache por cidade + histórico)
"""
import json
from unittest.mock import MagicMock

import pytest

from domain.entities.weather_data import WeatherData
from infrastructure.adapters.cache.weather_store import (
    WeatherStore,
    cache_key_for,
    decode_weather_data,
    encode_weather_data,
)


@pytest.fixture
def weather_store(memory_store):
    return WeatherStore(memory_store)


class TestCodec:

    def test_decode_of_encode_is_identity(self, make_weather_data):
        for weather in (
            make_weather_data(),
            make_weather_data(temperature_kelvin=0.0, description='', icon=''),
            make_weather_data(temperature_kelvin=250.123456789, description='névoa úmida', icon='50n'),
            WeatherData(temperature_kelvin=290.0),
        ):
            assert decode_weather_data(encode_weather_data(weather)) == weather

    def test_encoding_is_compact_api_json(self, make_weather_data):
        raw = encode_weather_data(make_weather_data(temperature_kelvin=300.0, description='clear sky', icon='01d'))

        assert raw == b'{"main":{"temp":300.0},"weather":[{"description":"clear sky","icon":"01d"}]}'

    def test_decode_invalid_raises(self):
        with pytest.raises(ValueError):
            decode_weather_data(b'garbage')

    def test_cache_key_has_no_separator(self):
        assert cache_key_for('Paris') == 'weatherCacheParis'
        assert cache_key_for('') == 'weatherCache'


class TestCache:

    def test_miss_returns_none(self, weather_store):
        assert weather_store.get_cached('Tokyo') is None

    def test_save_then_get(self, weather_store, make_weather_data):
        weather = make_weather_data()
        weather_store.save('Tokyo', weather)

        assert weather_store.get_cached('Tokyo') == weather

    def test_save_overwrites(self, weather_store, make_weather_data):
        weather_store.save('Tokyo', make_weather_data(temperature_kelvin=280.0))
        weather_store.save('Tokyo', make_weather_data(temperature_kelvin=290.0))

        assert weather_store.get_cached('Tokyo').temperature_kelvin == 290.0

    def test_keys_are_not_normalized(self, weather_store, make_weather_data):
        weather_store.save('tokyo', make_weather_data())

        assert weather_store.get_cached('Tokyo') is None
        assert weather_store.get_cached(' tokyo') is None

    def test_written_under_prefixed_key(self, weather_store, memory_store, make_weather_data):
        weather_store.save('Lima', make_weather_data())

        assert memory_store.keys() == ['weatherCacheLima']
        assert json.loads(memory_store.get('weatherCacheLima'))['main'] == {'temp': 300.0}

    def test_undecodable_entry_reads_as_absent(self, memory_store):
        errors = []
        store = WeatherStore(memory_store, on_error=lambda op, exc: errors.append((op, exc)))
        memory_store.set('weatherCacheOslo', b'{"main": "broken"}')

        assert store.get_cached('Oslo') is None
        assert len(errors) == 1
        assert errors[0][0] == 'get_cached'
        assert isinstance(errors[0][1], ValueError)

    def test_backend_failure_on_get_is_swallowed(self):
        backend = MagicMock()
        backend.get.side_effect = OSError("disk gone")
        hook = MagicMock()

        assert WeatherStore(backend, on_error=hook).get_cached('Oslo') is None
        hook.assert_called_once()
        assert hook.call_args[0][0] == 'get_cached'

    def test_backend_failure_on_save_is_swallowed(self, make_weather_data):
        backend = MagicMock()
        backend.set.side_effect = OSError("read-only")
        hook = MagicMock()

        WeatherStore(backend, on_error=hook).save('Oslo', make_weather_data())

        hook.assert_called_once()
        assert hook.call_args[0][0] == 'save'

    def test_encode_failure_skips_write(self):
        backend = MagicMock()
        unserializable = MagicMock()
        unserializable.to_dict.return_value = {"main": {"temp": object()}}

        WeatherStore(backend).save("Oslo", unserializable)

        backend.set.assert_not_called()

    def test_failing_hook_is_not_propagated(self):
        backend = MagicMock()
        backend.get.side_effect = RuntimeError("boom")

        def hook(operation, error):
            raise ValueError("hook failed")

        assert WeatherStore(backend, on_error=hook).get_cached('Oslo') is None


class TestHistory:

    def test_empty_history(self, weather_store):
        assert weather_store.get_history() == []

    def test_record_twice_keeps_single_entry(self, weather_store):
        weather_store.record_history('paris')
        weather_store.record_history('paris')

        assert weather_store.get_history() == ['paris']

    def test_re_searched_city_moves_to_front(self, weather_store):
        weather_store.record_history('paris')
        weather_store.record_history('london')
        weather_store.record_history('paris')

        assert weather_store.get_history() == ['paris', 'london']

    def test_most_recent_first(self, weather_store):
        for city in ['a', 'b', 'c']:
            weather_store.record_history(city)

        assert weather_store.get_history() == ['c', 'b', 'a']

    def test_removes_every_existing_occurrence(self, memory_store):
        memory_store.set_string_list('searchHistory', ['rome', 'oslo', 'rome', 'lima'])
        store = WeatherStore(memory_store)

        store.record_history('rome')

        assert store.get_history() == ['rome', 'oslo', 'lima']

    def test_exact_match_only(self, weather_store):
        weather_store.record_history('Paris')
        weather_store.record_history('paris')

        assert weather_store.get_history() == ['paris', 'Paris']

    def test_no_length_cap(self, weather_store):
        for i in range(250):
            weather_store.record_history(f'city-{i}')

        history = weather_store.get_history()
        assert len(history) == 250
        assert history[0] == 'city-249'

    def test_get_history_does_not_mutate(self, weather_store, memory_store):
        weather_store.record_history('lima')
        history = weather_store.get_history()
        history.append('injected')

        assert memory_store.get_string_list('searchHistory') == ['lima']

    def test_history_key_holding_bytes_reads_as_empty(self, memory_store):
        memory_store.set('searchHistory', b'oops')
        store = WeatherStore(memory_store)

        assert store.get_history() == []
        store.record_history('lima')
        assert store.get_history() == ['lima']

    def test_backend_failure_is_swallowed(self):
        backend = MagicMock()
        backend.get_string_list.side_effect = OSError("gone")
        hook = MagicMock()
        store = WeatherStore(backend, on_error=hook)

        assert store.get_history() == []
        store.record_history('lima')

        backend.set_string_list.assert_not_called()
        assert [c[0][0] for c in hook.call_args_list] == ['get_history', 'record_history']
