import os
import codecs
import yaml
from pydantic import BaseModel, ConfigDict, field_validator
from .env import ThrowableEnv


class ThrowableConfig(BaseModel):
    """
    Items of the configure file.

    configure naming rules:

    environment variable name is "HTTP_THROWABLE_" + yaml item name(upper)
    """
    model_config = ConfigDict(extra="forbid")

    stack_trace: bool = True
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value):
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding. ({value})")
        return value

    def export(self):
        # only items written in the configure file
        if "stack_trace" in self.model_fields_set:
            os.environ[ThrowableEnv.STACK_TRACE_ENV] = \
                    "1" if self.stack_trace else "0"
        if "encoding" in self.model_fields_set:
            os.environ[ThrowableEnv.ENCODING_ENV] = self.encoding


def parse_config(path):
    """
    configure file is yaml like:

        config:
          - stack_trace: false
          - encoding: utf-8
    """
    with open(path, "r") as file:
        obj = yaml.safe_load(file)

    items = dict()
    if obj is None or obj.get("config") is None:
        return ThrowableConfig()
    for __item in obj["config"]:
        item_name = list(__item.keys())[0]
        items[item_name] = __item[item_name]
    return ThrowableConfig(**items)


def throwable_config(path):
    """
    Load configure file and store it in environment variables.
    """
    config = parse_config(path)
    config.export()
    return config
