"""Test loading and validation of routes documents."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from elmapi.codegen.types import INT, STRING, Arg, Capture, Static, ref
from elmapi.exceptions import RoutesLoadError, RoutesValidationError
from elmapi.routes import QueryArgSpec, RouteLoader, RoutesDocument, RouteSpec, parse_path

from .fixtures import TEST_API, TEST_ROUTES_DOCUMENT, TEST_ROUTES_YAML


class TestParsePath:
    def test_static_and_captures(self):
        assert parse_path('/books/{id:Int}/pages') == (
            Static('books'),
            Capture(Arg('id', INT)),
            Static('pages'),
        )

    def test_capture_defaults_to_string(self):
        assert parse_path('/books/{title}') == (
            Static('books'),
            Capture(Arg('title', STRING)),
        )

    def test_named_capture_type(self):
        assert parse_path('/books/{isbn : Isbn}') == (
            Static('books'),
            Capture(Arg('isbn', ref('Isbn'))),
        )

    def test_empty_segments_ignored(self):
        assert parse_path('//books//') == (Static('books'),)
        assert parse_path('/') == ()

    @pytest.mark.parametrize(
        'path', ['/books/{id:Int', '/books/{Id:Int}', '/books/{type}', '/books/{id:int}']
    )
    def test_invalid(self, path):
        with pytest.raises(ValueError):
            parse_path(path)


class TestRouteSpec:
    @pytest.mark.parametrize(
        'method,path,expected',
        [
            ('GET', '/one', 'getOne'),
            ('GET', '/books/{id:Int}', 'getBooksById'),
            ('delete', '/books/{id:Int}/tags/{tag}', 'deleteBooksByIdTagsByTag'),
            ('POST', '/user-books', 'postUserBooks'),
            ('GET', '/', 'get'),
        ],
    )
    def test_derived_function_name(self, method, path, expected):
        route = RouteSpec(method=method, path=path, response='Int')
        assert route.function_name() == expected

    def test_explicit_function_name(self):
        route = RouteSpec(method='GET', path='/one', response='Int', name='fetchOne')
        assert route.function_name() == 'fetchOne'
        assert route.to_endpoint().function_name == 'fetchOne'

    @pytest.mark.parametrize('name', ['get-a', 'GetOne', 'in', '2fetch'])
    def test_invalid_explicit_name(self, name):
        """Test that explicit names must be Elm value identifiers."""
        with pytest.raises(ValueError, match='not a valid Elm'):
            RouteSpec(method='GET', path='/a', response='Int', name=name)

    @pytest.mark.parametrize(
        'name', ['emptyResponseHandler', 'handleResponse', 'promoteError']
    )
    def test_helper_names_reserved(self, name):
        """Test that routes cannot shadow the generated helper functions."""
        with pytest.raises(ValueError, match='reserved for a generated helper'):
            RouteSpec(method='GET', path='/a', response='Int', name=name)

    def test_method_is_upper_cased(self):
        assert RouteSpec(method='get', path='/one', response='Int').method == 'GET'

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            RouteSpec(method='FETCH', path='/one', response='Int')

    def test_response_required(self):
        with pytest.raises(ValueError):
            RouteSpec(method='GET', path='/one')

    def test_invalid_response_type(self):
        with pytest.raises(ValueError):
            RouteSpec(method='GET', path='/one', response='List')

    def test_duplicate_argument_names(self):
        with pytest.raises(ValueError, match='Duplicate argument names: id'):
            RouteSpec(
                method='GET',
                path='/books/{id:Int}',
                query=[{'name': 'id', 'type': 'Int'}],
                response='Book',
            )

    def test_body_argument_name_reserved(self):
        with pytest.raises(ValueError, match='body'):
            RouteSpec(
                method='POST',
                path='/books/{body}',
                body='Book',
                response='NoContent',
            )


class TestQueryArgSpec:
    def test_flag_needs_no_type(self):
        query_arg = QueryArgSpec(name='published', kind='flag').to_query_arg()
        assert query_arg.arg.type.kind == 'Bool'

    def test_list_wraps_element_type(self):
        query_arg = QueryArgSpec(name='tags', type='String', kind='list').to_query_arg()
        assert query_arg.arg.type.kind == 'List'
        assert query_arg.arg.type.args == (STRING,)

    def test_normal_needs_type(self):
        with pytest.raises(ValueError, match='needs a type'):
            QueryArgSpec(name='sort')

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            QueryArgSpec(name='sort', type='String', kind='repeated')

    @pytest.mark.parametrize('name', ['Sort', 'sort-order', 'if', '1st'])
    def test_invalid_name(self, name):
        with pytest.raises(ValueError):
            QueryArgSpec(name=name, type='String')


class TestRoutesDocument:
    def test_to_endpoints(self):
        """Test that the document describes the reference API."""
        document = RoutesDocument.model_validate(TEST_ROUTES_DOCUMENT)

        assert document.module == 'Generated.BooksApi'
        assert document.to_endpoints() == TEST_API

    def test_duplicate_function_names(self):
        with pytest.raises(ValueError, match='Duplicate function names: getOne'):
            RoutesDocument.model_validate(
                {
                    'routes': [
                        {'method': 'GET', 'path': '/one', 'response': 'Int'},
                        {'method': 'GET', 'path': '/one/', 'response': 'String'},
                    ]
                }
            )

    def test_empty_document(self):
        assert RoutesDocument().to_endpoints() == []


class TestRouteLoader:
    def test_load_yaml_file(self, tmp_path):
        (tmp_path / 'routes.yaml').write_text(TEST_ROUTES_YAML)

        endpoints = RouteLoader(base_path=tmp_path).load_endpoints('routes.yaml')

        assert endpoints == TEST_API

    def test_load_json_file(self, tmp_path):
        path = tmp_path / 'routes.json'
        path.write_text(json.dumps(TEST_ROUTES_DOCUMENT))

        document = RouteLoader().load(str(path))

        assert document.to_endpoints() == TEST_API

    def test_missing_file(self, tmp_path):
        with pytest.raises(RoutesLoadError) as exc_info:
            RouteLoader(base_path=tmp_path).load('missing.yaml')

        assert exc_info.value.source == 'missing.yaml'
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / 'routes.yaml').write_text('routes: [unclosed')

        with pytest.raises(RoutesLoadError):
            RouteLoader(base_path=tmp_path).load('routes.yaml')

    def test_not_a_mapping(self, tmp_path):
        (tmp_path / 'routes.yaml').write_text('- just\n- a list\n')

        with pytest.raises(RoutesValidationError) as exc_info:
            RouteLoader(base_path=tmp_path).load('routes.yaml')

        assert exc_info.value.errors == ['document must be a mapping']

    def test_validation_errors_name_location(self, tmp_path):
        (tmp_path / 'routes.yaml').write_text(
            'routes:\n  - method: GET\n    path: /one\n'
        )

        with pytest.raises(RoutesValidationError) as exc_info:
            RouteLoader(base_path=tmp_path).load('routes.yaml')

        assert any(
            error.startswith('routes.0.response') for error in exc_info.value.errors
        )

    def test_load_from_url(self):
        response = MagicMock()
        response.headers = {'content-type': 'application/json'}
        response.text = json.dumps(TEST_ROUTES_DOCUMENT)
        client = MagicMock()
        client.get.return_value = response

        endpoints = RouteLoader(http_client=client).load_endpoints(
            'https://example.com/routes'
        )

        client.get.assert_called_once_with('https://example.com/routes')
        assert endpoints == TEST_API

    def test_load_yaml_from_url(self):
        response = MagicMock()
        response.headers = {'content-type': 'text/plain'}
        response.text = TEST_ROUTES_YAML
        client = MagicMock()
        client.get.return_value = response

        document = RouteLoader(http_client=client).load('https://example.com/routes.yaml')

        assert document.module == 'Generated.BooksApi'

    def test_url_http_error(self):
        client = MagicMock()
        client.get.side_effect = httpx.ConnectError('connection refused')

        with pytest.raises(RoutesLoadError) as exc_info:
            RouteLoader(http_client=client).load('https://example.com/routes.yaml')

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
