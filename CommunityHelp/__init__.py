"""Project configuration package for the community help account backend."""
