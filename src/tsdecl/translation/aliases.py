"""Known host types with a fixed TypeScript rendering."""
from types import MappingProxyType

TYPE_ALIASES = MappingProxyType({
    "io.vertx.core.Closeable": (
        "(completionHandler: ((res: AsyncResult<void>) => void) | Handler<AsyncResult<void>>) => void"
    ),
    "java.lang.CharSequence": "string",
    "java.lang.Iterable<java.lang.String>": "string[]",
    "java.lang.Iterable<java.lang.CharSequence>": "string[]",
    "java.lang.Boolean[]": "boolean[]",
    "java.lang.Double[]": "number[]",
    "java.lang.Float[]": "number[]",
    "java.lang.Integer[]": "number[]",
    "java.lang.Long[]": "number[]",
    "java.lang.Short[]": "number[]",
    "java.lang.String[]": "string[]",
    # java.time values cross the bridge as JS dates
    "java.time.Instant": "Date",
    "java.time.LocalDate": "Date",
    "java.time.LocalDateTime": "Date",
    "java.time.ZonedDateTime": "Date",
})
