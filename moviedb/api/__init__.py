"""HTTP layer of the movie catalog."""
