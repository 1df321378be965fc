import pytest

from channelsite.modules.query_runner.service import QueryRunner


@pytest.mark.asyncio
async def test_rows_and_columns_are_returned(backend):
    backend.sql_responses["select id, name from projects"] = [
        {"id": 1, "name": "Blog"},
        {"id": 2, "name": "Shop"},
    ]
    runner = QueryRunner(backend)

    result = await runner.run("select id, name from projects")

    assert result.columns == ["id", "name"]
    assert result.row_count == 2
    assert result.error is None
    assert runner.snapshot().data["result"]["rows"][1]["name"] == "Shop"


@pytest.mark.asyncio
async def test_embedded_error_is_shown_verbatim(backend):
    backend.sql_responses["SELECT 1/0"] = {"error": "division by zero"}
    runner = QueryRunner(backend)

    result = await runner.run("SELECT 1/0")

    assert result.error == "division by zero"
    assert result.rows is None
    view = runner.snapshot()
    assert view.data["result"]["rows"] is None
    assert view.notifications[0].title == "Query failed"
    assert view.notifications[0].description == "division by zero"


@pytest.mark.asyncio
async def test_single_object_response_becomes_one_row(backend):
    backend.sql_responses["select count(*) as n from projects"] = {"n": 3}
    runner = QueryRunner(backend)

    result = await runner.run("select count(*) as n from projects")

    assert result.rows == [{"n": 3}]


@pytest.mark.asyncio
async def test_transport_failure_is_reported_the_same_way(backend):
    backend.fail("rpc", "Server disconnected")
    runner = QueryRunner(backend)

    result = await runner.run("select 1")

    assert result.error == "Server disconnected"
    assert runner.snapshot().notifications[0].variant == "destructive"


@pytest.mark.asyncio
async def test_blank_query_is_not_sent(backend):
    runner = QueryRunner(backend)

    assert await runner.run("   ") is None

    assert backend.calls == []
    assert runner.snapshot().notifications[0].description == "Enter a SQL query to execute"


@pytest.mark.asyncio
async def test_scalar_rows_are_wrapped(backend):
    backend.sql_responses["select unnest(array[1, 2])"] = [1, 2]
    runner = QueryRunner(backend)

    result = await runner.run("select unnest(array[1, 2])")

    assert result.columns == ["value"]
    assert result.rows == [{"value": 1}, {"value": 2}]
    assert result.error is None
