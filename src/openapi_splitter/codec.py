"""JSON and YAML encoding for document trees."""

import json

import yaml

FORMATS = ("json", "yaml")


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes repeated nodes out in full instead of as aliases."""

    def ignore_aliases(self, data):
        return True


class _StringTimestampLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamp-looking scalars as strings.

    Keeps `example: 2020-01-01` identical in JSON and YAML output.
    """


_StringTimestampLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def extension_for(fmt: str) -> str:
    """Return the file extension (with dot) used for the given format."""
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format: {fmt}")
    return f".{fmt}"


def encode(tree, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(tree, indent=2, ensure_ascii=False, default=str) + "\n"
    if fmt == "yaml":
        return yaml.dump(
            tree,
            Dumper=_NoAliasDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    raise ValueError(f"Unsupported format: {fmt}")


def decode(text: str, fmt: str):
    if fmt == "json":
        return json.loads(text)
    if fmt == "yaml":
        return yaml.load(text, Loader=_StringTimestampLoader)
    raise ValueError(f"Unsupported format: {fmt}")
