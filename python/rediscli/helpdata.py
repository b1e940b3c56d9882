"""Static command help table (name, arguments, group)."""

from __future__ import annotations

from typing import Optional, Tuple

HelpEntry = Tuple[str, str, str]

HELP_COMMANDS: Tuple[HelpEntry, ...] = (
    ("APPEND", "key value", "string"),
    ("AUTH", "password", "connection"),
    ("BGREWRITEAOF", "-", "server"),
    ("BGSAVE", "-", "server"),
    ("BITCOUNT", "key [start end]", "string"),
    ("BITOP", "operation destkey key [key ...]", "string"),
    ("BITPOS", "key bit [start] [end]", "string"),
    ("BLPOP", "key [key ...] timeout", "list"),
    ("BRPOP", "key [key ...] timeout", "list"),
    ("BRPOPLPUSH", "source destination timeout", "list"),
    ("CLIENT GETNAME", "-", "server"),
    ("CLIENT KILL", "[ip:port] [ID client-id] [TYPE normal|master|slave|pubsub] [ADDR ip:port] [SKIPME yes/no]", "server"),
    ("CLIENT LIST", "-", "server"),
    ("CLIENT SETNAME", "connection-name", "server"),
    ("CLUSTER INFO", "-", "cluster"),
    ("CLUSTER NODES", "-", "cluster"),
    ("CLUSTER SLOTS", "-", "cluster"),
    ("COMMAND", "-", "server"),
    ("COMMAND COUNT", "-", "server"),
    ("CONFIG GET", "parameter", "server"),
    ("CONFIG RESETSTAT", "-", "server"),
    ("CONFIG REWRITE", "-", "server"),
    ("CONFIG SET", "parameter value", "server"),
    ("DBSIZE", "-", "server"),
    ("DECR", "key", "string"),
    ("DECRBY", "key decrement", "string"),
    ("DEL", "key [key ...]", "generic"),
    ("DISCARD", "-", "transactions"),
    ("DUMP", "key", "generic"),
    ("ECHO", "message", "connection"),
    ("EVAL", "script numkeys key [key ...] arg [arg ...]", "scripting"),
    ("EVALSHA", "sha1 numkeys key [key ...] arg [arg ...]", "scripting"),
    ("EXEC", "-", "transactions"),
    ("EXISTS", "key [key ...]", "generic"),
    ("EXPIRE", "key seconds", "generic"),
    ("EXPIREAT", "key timestamp", "generic"),
    ("FLUSHALL", "[ASYNC]", "server"),
    ("FLUSHDB", "[ASYNC]", "server"),
    ("GEOADD", "key longitude latitude member [longitude latitude member ...]", "geo"),
    ("GEODIST", "key member1 member2 [unit]", "geo"),
    ("GEOHASH", "key member [member ...]", "geo"),
    ("GEOPOS", "key member [member ...]", "geo"),
    ("GEORADIUS", "key longitude latitude radius m|km|ft|mi [WITHCOORD] [WITHDIST] [WITHHASH] [COUNT count] [ASC|DESC]", "geo"),
    ("GET", "key", "string"),
    ("GETBIT", "key offset", "string"),
    ("GETRANGE", "key start end", "string"),
    ("GETSET", "key value", "string"),
    ("HDEL", "key field [field ...]", "hash"),
    ("HEXISTS", "key field", "hash"),
    ("HGET", "key field", "hash"),
    ("HGETALL", "key", "hash"),
    ("HINCRBY", "key field increment", "hash"),
    ("HINCRBYFLOAT", "key field increment", "hash"),
    ("HKEYS", "key", "hash"),
    ("HLEN", "key", "hash"),
    ("HMGET", "key field [field ...]", "hash"),
    ("HMSET", "key field value [field value ...]", "hash"),
    ("HSCAN", "key cursor [MATCH pattern] [COUNT count]", "hash"),
    ("HSET", "key field value", "hash"),
    ("HSETNX", "key field value", "hash"),
    ("HSTRLEN", "key field", "hash"),
    ("HVALS", "key", "hash"),
    ("INCR", "key", "string"),
    ("INCRBY", "key increment", "string"),
    ("INCRBYFLOAT", "key increment", "string"),
    ("INFO", "[section]", "server"),
    ("KEYS", "pattern", "generic"),
    ("LASTSAVE", "-", "server"),
    ("LINDEX", "key index", "list"),
    ("LINSERT", "key BEFORE|AFTER pivot value", "list"),
    ("LLEN", "key", "list"),
    ("LPOP", "key", "list"),
    ("LPUSH", "key value [value ...]", "list"),
    ("LPUSHX", "key value", "list"),
    ("LRANGE", "key start stop", "list"),
    ("LREM", "key count value", "list"),
    ("LSET", "key index value", "list"),
    ("LTRIM", "key start stop", "list"),
    ("MEMORY USAGE", "key [SAMPLES count]", "server"),
    ("MGET", "key [key ...]", "string"),
    ("MONITOR", "-", "server"),
    ("MOVE", "key db", "generic"),
    ("MSET", "key value [key value ...]", "string"),
    ("MSETNX", "key value [key value ...]", "string"),
    ("MULTI", "-", "transactions"),
    ("OBJECT", "subcommand [arguments [arguments ...]]", "generic"),
    ("PERSIST", "key", "generic"),
    ("PEXPIRE", "key milliseconds", "generic"),
    ("PEXPIREAT", "key milliseconds-timestamp", "generic"),
    ("PFADD", "key element [element ...]", "hyperloglog"),
    ("PFCOUNT", "key [key ...]", "hyperloglog"),
    ("PFMERGE", "destkey sourcekey [sourcekey ...]", "hyperloglog"),
    ("PING", "[message]", "connection"),
    ("PSETEX", "key milliseconds value", "string"),
    ("PSUBSCRIBE", "pattern [pattern ...]", "pubsub"),
    ("PTTL", "key", "generic"),
    ("PUBLISH", "channel message", "pubsub"),
    ("PUBSUB", "subcommand [argument [argument ...]]", "pubsub"),
    ("PUNSUBSCRIBE", "[pattern [pattern ...]]", "pubsub"),
    ("QUIT", "-", "connection"),
    ("RANDOMKEY", "-", "generic"),
    ("RENAME", "key newkey", "generic"),
    ("RENAMENX", "key newkey", "generic"),
    ("RESTORE", "key ttl serialized-value [REPLACE]", "generic"),
    ("ROLE", "-", "server"),
    ("RPOP", "key", "list"),
    ("RPOPLPUSH", "source destination", "list"),
    ("RPUSH", "key value [value ...]", "list"),
    ("RPUSHX", "key value", "list"),
    ("SADD", "key member [member ...]", "set"),
    ("SAVE", "-", "server"),
    ("SCAN", "cursor [MATCH pattern] [COUNT count]", "generic"),
    ("SCARD", "key", "set"),
    ("SCRIPT EXISTS", "sha1 [sha1 ...]", "scripting"),
    ("SCRIPT FLUSH", "-", "scripting"),
    ("SCRIPT KILL", "-", "scripting"),
    ("SCRIPT LOAD", "script", "scripting"),
    ("SDIFF", "key [key ...]", "set"),
    ("SDIFFSTORE", "destination key [key ...]", "set"),
    ("SELECT", "index", "connection"),
    ("SET", "key value [EX seconds] [PX milliseconds] [NX|XX]", "string"),
    ("SETBIT", "key offset value", "string"),
    ("SETEX", "key seconds value", "string"),
    ("SETNX", "key value", "string"),
    ("SETRANGE", "key offset value", "string"),
    ("SHUTDOWN", "[NOSAVE|SAVE]", "server"),
    ("SINTER", "key [key ...]", "set"),
    ("SINTERSTORE", "destination key [key ...]", "set"),
    ("SISMEMBER", "key member", "set"),
    ("SLAVEOF", "host port", "server"),
    ("SLOWLOG", "subcommand [argument]", "server"),
    ("SMEMBERS", "key", "set"),
    ("SMOVE", "source destination member", "set"),
    ("SORT", "key [BY pattern] [LIMIT offset count] [GET pattern [GET pattern ...]] [ASC|DESC] [ALPHA] [STORE destination]", "generic"),
    ("SPOP", "key [count]", "set"),
    ("SRANDMEMBER", "key [count]", "set"),
    ("SREM", "key member [member ...]", "set"),
    ("SSCAN", "key cursor [MATCH pattern] [COUNT count]", "set"),
    ("STRLEN", "key", "string"),
    ("SUBSCRIBE", "channel [channel ...]", "pubsub"),
    ("SUNION", "key [key ...]", "set"),
    ("SUNIONSTORE", "destination key [key ...]", "set"),
    ("SWAPDB", "index index", "server"),
    ("TIME", "-", "server"),
    ("TOUCH", "key [key ...]", "generic"),
    ("TTL", "key", "generic"),
    ("TYPE", "key", "generic"),
    ("UNLINK", "key [key ...]", "generic"),
    ("UNSUBSCRIBE", "[channel [channel ...]]", "pubsub"),
    ("UNWATCH", "-", "transactions"),
    ("WAIT", "numslaves timeout", "generic"),
    ("WATCH", "key [key ...]", "transactions"),
    ("XADD", "key ID field string [field string ...]", "stream"),
    ("XLEN", "key", "stream"),
    ("XRANGE", "key start end [COUNT count]", "stream"),
    ("XREAD", "[COUNT count] [BLOCK milliseconds] STREAMS key [key ...] ID [ID ...]", "stream"),
    ("ZADD", "key [NX|XX] [CH] [INCR] score member [score member ...]", "sorted_set"),
    ("ZCARD", "key", "sorted_set"),
    ("ZCOUNT", "key min max", "sorted_set"),
    ("ZINCRBY", "key increment member", "sorted_set"),
    ("ZINTERSTORE", "destination numkeys key [key ...] [WEIGHTS weight] [AGGREGATE SUM|MIN|MAX]", "sorted_set"),
    ("ZLEXCOUNT", "key min max", "sorted_set"),
    ("ZRANGE", "key start stop [WITHSCORES]", "sorted_set"),
    ("ZRANGEBYLEX", "key min max [LIMIT offset count]", "sorted_set"),
    ("ZRANGEBYSCORE", "key min max [WITHSCORES] [LIMIT offset count]", "sorted_set"),
    ("ZRANK", "key member", "sorted_set"),
    ("ZREM", "key member [member ...]", "sorted_set"),
    ("ZREMRANGEBYRANK", "key start stop", "sorted_set"),
    ("ZREMRANGEBYSCORE", "key min max", "sorted_set"),
    ("ZREVRANGE", "key start stop [WITHSCORES]", "sorted_set"),
    ("ZREVRANGEBYSCORE", "key max min [WITHSCORES] [LIMIT offset count]", "sorted_set"),
    ("ZREVRANK", "key member", "sorted_set"),
    ("ZSCAN", "key cursor [MATCH pattern] [COUNT count]", "sorted_set"),
    ("ZSCORE", "key member", "sorted_set"),
    ("ZUNIONSTORE", "destination numkeys key [key ...] [WEIGHTS weight] [AGGREGATE SUM|MIN|MAX]", "sorted_set"),
)


def lookup_help(name: str) -> Optional[HelpEntry]:
    needle = name.upper()
    for entry in HELP_COMMANDS:
        if entry[0] == needle:
            return entry
    return None


def command_names():
    return [entry[0] for entry in HELP_COMMANDS]
