import pytest

from places_client.servers.tool_registry import McpServersRegistry


@pytest.mark.asyncio
async def test_registry_mounts_places_tools():
    registry = McpServersRegistry()
    await registry.initialize()
    await registry.initialize()

    tools = await registry.get_registry().list_tools()
    names = sorted(t.name for t in tools)

    assert len(names) == 4
    for tool in ["search_places", "search_nearby_places", "get_place_details", "autocomplete_places"]:
        assert any(name.endswith(tool) for name in names)
