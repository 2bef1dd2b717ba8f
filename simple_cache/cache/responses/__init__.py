"""Response variant model for Simple-Cache."""

from .base import (
    ErrorResponse,
    ResponseBase,
)
from .control import (
    CreateCacheResponse,
    CreateCacheResponseSuccess,
    CreateCacheResponseAlreadyExists,
    CreateCacheResponseError,
    DeleteCacheResponse,
    DeleteCacheResponseSuccess,
    DeleteCacheResponseError,
    ListCachesResponse,
    ListCachesResponseSuccess,
    ListCachesResponseError,
)
from .scalar import (
    CacheSetResponse,
    CacheSetResponseSuccess,
    CacheSetResponseError,
    CacheGetResponse,
    CacheGetResponseHit,
    CacheGetResponseMiss,
    CacheGetResponseError,
    CacheDeleteResponse,
    CacheDeleteResponseSuccess,
    CacheDeleteResponseError,
)
from .lists import (
    CacheListPushFrontResponse,
    CacheListPushFrontResponseSuccess,
    CacheListPushFrontResponseError,
    CacheListPushBackResponse,
    CacheListPushBackResponseSuccess,
    CacheListPushBackResponseError,
    CacheListPopFrontResponse,
    CacheListPopFrontResponseHit,
    CacheListPopFrontResponseMiss,
    CacheListPopFrontResponseError,
    CacheListPopBackResponse,
    CacheListPopBackResponseHit,
    CacheListPopBackResponseMiss,
    CacheListPopBackResponseError,
    CacheListFetchResponse,
    CacheListFetchResponseHit,
    CacheListFetchResponseMiss,
    CacheListFetchResponseError,
    CacheListRemoveValueResponse,
    CacheListRemoveValueResponseSuccess,
    CacheListRemoveValueResponseError,
    CacheListLengthResponse,
    CacheListLengthResponseSuccess,
    CacheListLengthResponseError,
    CacheListEraseResponse,
    CacheListEraseResponseSuccess,
    CacheListEraseResponseError,
)
from .dictionaries import (
    CacheDictionarySetResponse,
    CacheDictionarySetResponseSuccess,
    CacheDictionarySetResponseError,
    CacheDictionaryGetResponse,
    CacheDictionaryGetResponseHit,
    CacheDictionaryGetResponseMiss,
    CacheDictionaryGetResponseError,
    CacheDictionaryFetchResponse,
    CacheDictionaryFetchResponseHit,
    CacheDictionaryFetchResponseMiss,
    CacheDictionaryFetchResponseError,
    CacheDictionaryRemoveFieldResponse,
    CacheDictionaryRemoveFieldResponseSuccess,
    CacheDictionaryRemoveFieldResponseError,
    CacheDictionaryDeleteResponse,
    CacheDictionaryDeleteResponseSuccess,
    CacheDictionaryDeleteResponseError,
    CacheDictionaryIncrementResponse,
    CacheDictionaryIncrementResponseSuccess,
    CacheDictionaryIncrementResponseError,
)

__all__ = [
    "ResponseBase",
    "ErrorResponse",
    "CreateCacheResponse",
    "CreateCacheResponseSuccess",
    "CreateCacheResponseAlreadyExists",
    "CreateCacheResponseError",
    "DeleteCacheResponse",
    "DeleteCacheResponseSuccess",
    "DeleteCacheResponseError",
    "ListCachesResponse",
    "ListCachesResponseSuccess",
    "ListCachesResponseError",
    "CacheSetResponse",
    "CacheSetResponseSuccess",
    "CacheSetResponseError",
    "CacheGetResponse",
    "CacheGetResponseHit",
    "CacheGetResponseMiss",
    "CacheGetResponseError",
    "CacheDeleteResponse",
    "CacheDeleteResponseSuccess",
    "CacheDeleteResponseError",
    "CacheListPushFrontResponse",
    "CacheListPushFrontResponseSuccess",
    "CacheListPushFrontResponseError",
    "CacheListPushBackResponse",
    "CacheListPushBackResponseSuccess",
    "CacheListPushBackResponseError",
    "CacheListPopFrontResponse",
    "CacheListPopFrontResponseHit",
    "CacheListPopFrontResponseMiss",
    "CacheListPopFrontResponseError",
    "CacheListPopBackResponse",
    "CacheListPopBackResponseHit",
    "CacheListPopBackResponseMiss",
    "CacheListPopBackResponseError",
    "CacheListFetchResponse",
    "CacheListFetchResponseHit",
    "CacheListFetchResponseMiss",
    "CacheListFetchResponseError",
    "CacheListRemoveValueResponse",
    "CacheListRemoveValueResponseSuccess",
    "CacheListRemoveValueResponseError",
    "CacheListLengthResponse",
    "CacheListLengthResponseSuccess",
    "CacheListLengthResponseError",
    "CacheListEraseResponse",
    "CacheListEraseResponseSuccess",
    "CacheListEraseResponseError",
    "CacheDictionarySetResponse",
    "CacheDictionarySetResponseSuccess",
    "CacheDictionarySetResponseError",
    "CacheDictionaryGetResponse",
    "CacheDictionaryGetResponseHit",
    "CacheDictionaryGetResponseMiss",
    "CacheDictionaryGetResponseError",
    "CacheDictionaryFetchResponse",
    "CacheDictionaryFetchResponseHit",
    "CacheDictionaryFetchResponseMiss",
    "CacheDictionaryFetchResponseError",
    "CacheDictionaryRemoveFieldResponse",
    "CacheDictionaryRemoveFieldResponseSuccess",
    "CacheDictionaryRemoveFieldResponseError",
    "CacheDictionaryDeleteResponse",
    "CacheDictionaryDeleteResponseSuccess",
    "CacheDictionaryDeleteResponseError",
    "CacheDictionaryIncrementResponse",
    "CacheDictionaryIncrementResponseSuccess",
    "CacheDictionaryIncrementResponseError",
]
