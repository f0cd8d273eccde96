import pytest

from QueryRepair.Model.SuggestedQuery import SuggestedQuery
from QueryRepair.Routes.validators import map_suggested_queries, validate_connection_args, validate_did_you_mean_params


def test_validate_did_you_mean_params():
    assert validate_did_you_mean_params({"q": 'a"'}, 10) == 'a"'
    assert validate_did_you_mean_params({"q": ""}, 10) == ""
    with pytest.raises(ValueError):
        validate_did_you_mean_params({}, 10)
    with pytest.raises(ValueError):
        validate_did_you_mean_params({"q": "x" * 11}, 10)


def test_validate_connection_args():
    args = validate_connection_args({"first": "5", "offset": "2"})
    assert args.first == 5 and args.offset == 2
    defaults = validate_connection_args({})
    assert defaults.first is None and defaults.offset == 0
    with pytest.raises(ValueError):
        validate_connection_args({"first": "many"})
    with pytest.raises(ValueError):
        validate_connection_args({"offset": "-3"})


def test_map_suggested_queries():
    mapped = map_suggested_queries([SuggestedQuery("quote the whole thing", '""')])
    assert mapped == [{"description": "quote the whole thing", "query": '""'}]
