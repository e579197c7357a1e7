# Pantry Chat: chat screens backed by a hosted text-generation API.
