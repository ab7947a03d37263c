"""Core generation logic for Ad Studio.

Modules
-------
config
    Pydantic Settings configuration (``ADSTUDIO_`` environment prefix).
errors
    Exception hierarchy rooted at :class:`AdStudioError`.
aspects
    Aspect enum, fixed pixel dimensions and sampling defaults.
records
    Records passed between generation stages.
prompt_builder
    Five-variant prompt compilation from an ad input.
prompt_store
    Ephemeral base-prompt storage used by regeneration.
tweaks
    Keyword-driven prompt tweaks.
runware_client
    Async HTTP client for the Runware tasks endpoint.
shaping
    Conversion of Runware results into API image records.
service
    :class:`ImageService`, which composes all of the above.
"""
