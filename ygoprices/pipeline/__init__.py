"""Request pipeline: transport -> envelope -> mapper."""
