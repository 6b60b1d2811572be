import argparse
import json
import logging

import pytest

from geogebra_tools.main import run


def make_args(**overrides) -> argparse.Namespace:
    values = {"list_tools": False, "call": None, "args": None, "status": False, "mock": True}
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for var in ("GEOGEBRA_ENGINE_URL", "GEOGEBRA_ENGINE_BACKEND", "GEOGEBRA_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    yield
    logging.getLogger().handlers.clear()


@pytest.mark.asyncio
async def test_list_tools(capsys):
    code = await run(make_args(list_tools=True))

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [t["name"] for t in out["tools"]][:4] == [
        "geogebra_create_point",
        "geogebra_create_line",
        "geogebra_create_circle",
        "geogebra_create_polygon",
    ]


@pytest.mark.asyncio
async def test_call_tool(capsys):
    code = await run(make_args(call="geogebra_create_point", args='{"name": "A", "x": 1, "y": 2}'))

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["isError"] is False
    assert json.loads(out["content"][0]["text"])["command"] == "A = (1, 2)"


@pytest.mark.asyncio
async def test_call_tool_validation_error(capsys):
    code = await run(make_args(call="geogebra_create_polygon", args='{"name": "p", "vertices": ["A"]}'))

    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out["isError"] is True


@pytest.mark.asyncio
async def test_bad_json_arguments():
    assert await run(make_args(call="geogebra_create_point", args="{not json")) == 2


@pytest.mark.asyncio
async def test_status(capsys):
    code = await run(make_args(status=True))

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out == {"ready": True, "objects": []}
