from typing import Optional, Tuple, Union
import xml.etree.ElementTree as ET
from xml.etree.ElementTree import Element

from .consts import XML_DECLARATION


Number = Union[int, float]


def get_child_optional(el: Element, path: str) -> Optional[Element]:
    path = path.split('.')
    assert path[0] == el.tag
    elem = el
    for item in path[1:]:
        elem = elem.find(item)
        if elem is None:
            return elem
    return elem


def split_namespace(tag: str) -> Tuple[Optional[str], str]:
    if tag.startswith('{'):
        ns, _, local = tag[1:].partition('}')
        return ns, local
    return None, tag


def remove_namespaces(el: Element) -> None:
    if el.tag.startswith('{'):
        _, _, el.tag = el.tag.rpartition('}')
    for child in el:
        remove_namespaces(child)


def xml_to_dict(el: Element) -> dict:
    result = {}

    # namespace qualified attributes (xsi:schemaLocation etc) are hints for
    # validators and carry no mission data
    if el.attrib:
        result.update({k: v for k, v in el.attrib.items() if not k.startswith('{')})

    for child in el:
        child_dict = xml_to_dict(child)
        if child.tag in result:
            if isinstance(result[child.tag], list):
                result[child.tag].append(child_dict)
            else:
                result[child.tag] = [result[child.tag], child_dict]
        else:
            result[child.tag] = child_dict

    if el.text and el.text.strip():
        result['text'] = el.text.strip()

    return result


def format_value(value) -> str:
    """Render an attribute or text value the way the mission schema expects it."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(text: str) -> Number:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_bool(text: Optional[str]) -> bool:
    if text is None:
        return False
    return text.strip().lower() in ('true', '1')


def sub_element(parent: Element, tag: str, text=None, **attrib) -> Element:
    el = ET.SubElement(parent, tag)
    for k, v in attrib.items():
        if v is not None:
            el.attrib[k] = format_value(v)
    if text is not None:
        el.text = format_value(text)
    return el


def to_string(el: Element, pretty_print: bool) -> str:
    if pretty_print:
        ET.indent(el, space='  ')
    # a raw carriage return would be read back as a newline
    text = ET.tostring(el, encoding='unicode', method='xml').replace('\r', '&#13;')
    if pretty_print:
        return XML_DECLARATION + '\n' + text + '\n'
    return XML_DECLARATION + text
