from objtasks.codec.json_codec import decode_from_json, encode_to_json

__all__ = ["encode_to_json", "decode_from_json"]
