__all__ = [
    "use_locale",
    "name_color",
    "nearest_colors",
    "lookup_color",
    "list_color_names",
    "translate_color",
]

def __getattr__(name: str):
    if name in __all__:
        from . import default

        return getattr(default, name)
    raise AttributeError(name)
