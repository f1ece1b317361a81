"""Check out, track and open GitHub pull requests as local git branches."""
