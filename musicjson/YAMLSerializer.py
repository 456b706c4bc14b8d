'''
### YAMLSerializer Module

PyYAML representers for MusicJSON object trees.

Classes:
    `FlowStyleList`:
        A list emitted in flow style (`['1', '2']`), used for short annotation lists.

Functions:
    `dump_yaml`:
        Serializes an object tree to YAML, keeping the record key order.
'''

import yaml


class FlowStyleList(list):
        pass


def represent_flow_style_list(dumper, data):
        return dumper.represent_sequence('tag:yaml.org,2002:seq', data, flow_style=True)


yaml.add_representer(FlowStyleList, represent_flow_style_list)
yaml.add_representer(FlowStyleList, represent_flow_style_list, Dumper=yaml.SafeDumper)


def dump_yaml(obj, stream=None):
        return yaml.safe_dump(obj, stream, sort_keys=False, allow_unicode=True, default_flow_style=False)
