from enum import StrEnum


class MigrationPolicy(StrEnum):
    """When local data may be pushed to the remote store on login.

    SKIP_IF_REMOTE_DATA: skip the whole run if the viewer already owns any
        remote gradient or favorite. Newer local edits of other collections
        stay local in that case.
    PER_COLLECTION: skip only the collections whose remote table already
        holds rows owned by the viewer.
    ALWAYS: always upsert. Remote rows with the same ids are overwritten.
    """

    SKIP_IF_REMOTE_DATA = "skip_if_remote_data"
    PER_COLLECTION = "per_collection"
    ALWAYS = "always"
