"""bumptag: create the next semantic version tag with a changelog annotation."""
