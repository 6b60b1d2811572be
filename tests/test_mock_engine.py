import pytest

from geogebra_tools.engine.mock_engine import MockGeoGebraEngine


@pytest.mark.asyncio
async def test_lifecycle():
    engine = MockGeoGebraEngine()
    assert not await engine.is_ready()
    await engine.initialize()
    assert await engine.is_ready()
    await engine.cleanup()
    assert not await engine.is_ready()


@pytest.mark.asyncio
async def test_tracks_assignments_and_equations():
    engine = MockGeoGebraEngine()
    await engine.eval_command("A = (1, 2)")
    await engine.eval_command("line2: y = 2x + 3")
    await engine.eval_command("SetColor(A, red)")

    assert await engine.get_all_object_names() == ["A", "line2"]
    assert engine.commands == ["A = (1, 2)", "line2: y = 2x + 3", "SetColor(A, red)"]
    assert await engine.get_object_info("A") == {"name": "A", "definition": "A = (1, 2)"}
    assert await engine.get_object_info("missing") == {}


@pytest.mark.asyncio
async def test_delete_and_new_construction():
    engine = MockGeoGebraEngine()
    await engine.eval_command("A = (0, 0)")
    await engine.eval_command("B = (1, 0)")
    await engine.eval_command("Delete(A)")
    assert await engine.get_all_object_names() == ["B"]

    await engine.new_construction()
    assert await engine.get_all_object_names() == []


@pytest.mark.asyncio
async def test_fail_with():
    engine = MockGeoGebraEngine(fail_with="Syntax error")
    result = await engine.eval_command("A = (1, 2)")

    assert result.success is False
    assert result.error == "Syntax error"
    assert await engine.get_all_object_names() == []


@pytest.mark.asyncio
async def test_multiline_commands_do_not_touch_objects():
    engine = MockGeoGebraEngine()
    await engine.eval_command("A = (0, 0)")
    await engine.eval_command("Delete(A)\n")
    await engine.eval_command("B\n= (1, 1)")

    assert await engine.get_all_object_names() == ["A"]
