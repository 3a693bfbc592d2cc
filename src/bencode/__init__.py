"""
Bencode package for decoding BitTorrent metainfo.
"""
from .decoder import BencodeDecodeError, BencodeDecoder, decode, decode_with_info_range
from .encoder import encode
from .limits import DEFAULT_LIMITS, DecoderLimits
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType, decode_text

__all__ = [
    'decode',
    'decode_with_info_range',
    'encode',
    'decode_text',
    'BencodeDecoder',
    'BencodeDecodeError',
    'DecoderLimits',
    'DEFAULT_LIMITS',
    'BencodeType',
    'BencodeInt',
    'BencodeString',
    'BencodeList',
    'BencodeDict',
]
