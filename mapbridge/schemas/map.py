def validate_update_map(data) -> str:
    if not isinstance(data, dict):
        raise ValueError("JSON object body required")
    if "mapData" not in data or data["mapData"] is None:
        raise ValueError("mapData required")
    map_data = data["mapData"]
    if not isinstance(map_data, str):
        raise ValueError("mapData must be a string")
    return map_data
