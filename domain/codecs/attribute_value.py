from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.codecs.binary import Base64Codec
from domain.codecs.numeric import NumericKind, StringNumericCodec
from domain.value_objects.attribute_value import AttributeType, AttributeValue
from domain.value_objects.codec_errors import CodecError, InvalidEncoding, TypeMismatch
from domain.value_objects.wire import WireValue, wire_kind

_NUMBER = StringNumericCodec(NumericKind.DECIMAL)
_BINARY = Base64Codec()


class AttributeValueCodec(Codec[AttributeValue]):
    """Change-stream attribute value: an object with a single type descriptor.

    ``{"N": "12.50"}`` decodes to a NUMBER attribute holding ``Decimal("12.50")``;
    ``{"M": {...}}`` and ``{"L": [...]}`` recurse. Failures carry the path
    down through the type descriptors.
    """

    __slots__ = ()

    expected = "attribute value object"
    lossless = False

    def decode(self, wire: WireValue) -> Result[AttributeValue, CodecError]:
        if not isinstance(wire, dict):
            return self.mismatch(wire)
        if len(wire) != 1:
            return Failure(
                InvalidEncoding(
                    detail=f"attribute value must have exactly one type descriptor, got {sorted(wire)}",
                ),
            )
        ((descriptor, payload),) = wire.items()
        try:
            attribute_type = AttributeType(descriptor)
        except ValueError:
            return Failure(InvalidEncoding(detail=f"unknown attribute type descriptor {descriptor!r}"))
        return self._decode_payload(attribute_type, payload).alt(
            lambda error: error.at(descriptor),
        )

    def _decode_payload(
        self,
        attribute_type: AttributeType,
        payload: WireValue,
    ) -> Result[AttributeValue, CodecError]:
        match attribute_type:
            case AttributeType.STRING:
                if not isinstance(payload, str):
                    return _mismatch("string", payload)
                value: object = payload
            case AttributeType.NUMBER:
                result = _NUMBER.decode(payload)
                if isinstance(result, Failure):
                    return result
                value = result.unwrap()
            case AttributeType.BINARY:
                result = _BINARY.decode(payload)
                if isinstance(result, Failure):
                    return result
                value = result.unwrap()
            case AttributeType.BOOLEAN:
                if not isinstance(payload, bool):
                    return _mismatch("boolean", payload)
                value = payload
            case AttributeType.NULL:
                if payload is not True:
                    return Failure(InvalidEncoding(detail="NULL attribute must carry true"))
                value = None
            case AttributeType.STRING_SET:
                return self._decode_set(attribute_type, payload, None)
            case AttributeType.NUMBER_SET:
                return self._decode_set(attribute_type, payload, _NUMBER)
            case AttributeType.BINARY_SET:
                return self._decode_set(attribute_type, payload, _BINARY)
            case AttributeType.LIST:
                if not isinstance(payload, list):
                    return _mismatch("array", payload)
                items: list[AttributeValue] = []
                for index, element in enumerate(payload):
                    decoded = self.decode(element)
                    if isinstance(decoded, Failure):
                        return Failure(decoded.failure().at(index))
                    items.append(decoded.unwrap())
                value = tuple(items)
            case AttributeType.MAP:
                if not isinstance(payload, dict):
                    return _mismatch("object", payload)
                members: dict[str, AttributeValue] = {}
                for key, element in payload.items():
                    decoded = self.decode(element)
                    if isinstance(decoded, Failure):
                        return Failure(decoded.failure().at(key))
                    members[key] = decoded.unwrap()
                value = members
        return Success(AttributeValue(type=attribute_type, value=value))

    def _decode_set(
        self,
        attribute_type: AttributeType,
        payload: WireValue,
        element_codec: Codec[object] | None,
    ) -> Result[AttributeValue, CodecError]:
        if not isinstance(payload, list):
            return _mismatch("array", payload)
        items: list[object] = []
        for index, element in enumerate(payload):
            if element_codec is None:
                if not isinstance(element, str):
                    return Failure(TypeMismatch(expected="string", actual_kind=wire_kind(element)).at(index))
                items.append(element)
                continue
            decoded = element_codec.decode(element)
            if isinstance(decoded, Failure):
                return Failure(decoded.failure().at(index))
            items.append(decoded.unwrap())
        return Success(AttributeValue(type=attribute_type, value=tuple(items)))

    def encode(self, value: AttributeValue) -> WireValue:
        payload: WireValue
        match value.type:
            case AttributeType.NUMBER:
                payload = _NUMBER.encode(value.value)
            case AttributeType.BINARY:
                payload = _BINARY.encode(value.value)
            case AttributeType.NULL:
                payload = True
            case AttributeType.NUMBER_SET:
                payload = [_NUMBER.encode(item) for item in value.value]
            case AttributeType.BINARY_SET:
                payload = [_BINARY.encode(item) for item in value.value]
            case AttributeType.STRING_SET:
                payload = list(value.value)
            case AttributeType.LIST:
                payload = [self.encode(item) for item in value.value]
            case AttributeType.MAP:
                payload = {key: self.encode(item) for key, item in value.value.items()}
            case _:
                payload = value.value
        return {value.type.value: payload}


def _mismatch(expected: str, payload: WireValue) -> Failure[CodecError]:
    return Failure(TypeMismatch(expected=expected, actual_kind=wire_kind(payload)))
