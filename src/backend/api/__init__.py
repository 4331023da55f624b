"""HTTP surface for the LightBnB data layer."""
