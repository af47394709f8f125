"""ECS: threshold regulation of a heater and a window from a temperature sensor."""
