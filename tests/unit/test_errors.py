"""Tests for the HTTP error utilities."""
import pytest

from codegen.services.service_base import NotFoundError, OperationError, ServiceError, ValidationError
from codegen.routes.response_utils import handle_exceptions
from codegen.utils.errors import AppError, BadRequestError, build_error_payload, map_service_exception


@pytest.mark.unit
class TestErrorUtilities:

    @pytest.mark.parametrize('exc,status', [
        (NotFoundError('x'), 404),
        (ValidationError('x'), 400),
        (OperationError('x'), 500),
        (ServiceError('x'), 500),
        (RuntimeError('x'), 500),
    ])
    def test_service_exception_mapping(self, exc, status):
        assert map_service_exception(exc) == status

    def test_bad_request_defaults(self):
        err = BadRequestError("nope", code='missing_fields')
        assert isinstance(err, AppError)
        assert err.http_status == 400
        assert str(err) == "nope"

    def test_payload_outside_request(self):
        payload = build_error_payload("boom", status=500, details=None, code='x')
        assert payload['status'] == 'error'
        assert payload['status_code'] == 500
        assert payload['error'] == 'boom'
        assert payload['error_id'] is None
        assert payload['path'] is None
        assert payload['code'] == 'x'
        assert 'details' not in payload


def _add_failing_routes(app):
    def crash():
        raise RuntimeError("disk on fire")

    app.add_url_rule('/boom', 'boom', crash)
    app.add_url_rule('/boom-envelope', 'boom_envelope', handle_exceptions(crash))


@pytest.mark.unit
class TestUnhandledErrors:

    def test_details_hidden_by_default(self, app):
        _add_failing_routes(app)
        response = app.test_client().get('/boom')
        assert response.status_code == 500
        data = response.get_json()
        assert data['error'] == 'Internal Server Error'
        assert 'debug' not in data

    def test_details_shown_when_enabled(self, app):
        app.config['SHOW_ERROR_DETAILS'] = True
        _add_failing_routes(app)
        data = app.test_client().get('/boom').get_json()
        assert data['debug']['exception_type'] == 'RuntimeError'
        assert 'disk on fire' in data['debug']['stacktrace']

    def test_show_error_details_defaults_off(self, app):
        assert app.config['SHOW_ERROR_DETAILS'] is False

    def test_envelope_route_returns_500(self, app):
        _add_failing_routes(app)
        response = app.test_client().get('/boom-envelope')
        assert response.status_code == 500
        data = response.get_json()
        assert data['ok'] is False
        assert data['message'] == 'Internal server error'
        assert data['error'] == {'type': 'RuntimeError', 'details': {'detail': 'disk on fire'}}

    def test_envelope_route_maps_service_errors(self, app):
        def missing():
            raise NotFoundError("no such thing")

        app.add_url_rule('/missing', 'missing', handle_exceptions(missing))
        response = app.test_client().get('/missing')
        assert response.status_code == 404
        assert response.get_json()['error']['type'] == 'NotFoundError'
