"""Call-log row widget that paints a strip of call-type icons.

Typical wiring::

    from call_type_icons.icons import resources_from_config
    from call_type_icons.view import CallTypeIconsView

    resources = resources_from_config()   # load_config() -> IconStyle -> shared bundle
    view = CallTypeIconsView(resources)
"""

__version__ = "1.0.0"
