"""Version 1 of the Pet Adoption API."""
