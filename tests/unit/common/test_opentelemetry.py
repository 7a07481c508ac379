from fastapi import FastAPI
from pytest_mock import MockerFixture

from task_tracker.common.opentelemetry import setup_opentelemetry

MODULE = "task_tracker.common.opentelemetry"


def test_setup_opentelemetry_instruments_app_and_database(
    mocker: MockerFixture,
) -> None:
    mock_trace = mocker.patch(f"{MODULE}.trace")
    mock_exporter = mocker.patch(f"{MODULE}.OTLPSpanExporter")
    mock_processor = mocker.patch(f"{MODULE}.BatchSpanProcessor")
    mock_fastapi_instrumentor = mocker.patch(f"{MODULE}.FastAPIInstrumentor")
    mock_sqlalchemy_instrumentor = mocker.patch(f"{MODULE}.SQLAlchemyInstrumentor")
    app = FastAPI()

    setup_opentelemetry("task-tracker-test", app)

    mock_trace.set_tracer_provider.assert_called_once()
    provider = mock_trace.set_tracer_provider.call_args.args[0]
    assert provider.resource.attributes["service.name"] == "task-tracker-test"
    mock_processor.assert_called_once_with(mock_exporter.return_value)
    mock_fastapi_instrumentor.instrument_app.assert_called_once_with(app)
    mock_sqlalchemy_instrumentor.return_value.instrument.assert_called_once_with()
