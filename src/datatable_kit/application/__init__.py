"""Application layer – table state slices, URL sync, caching and the controller."""
