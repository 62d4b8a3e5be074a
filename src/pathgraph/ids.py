import uuid


def new_id():
    # one opaque identifier per node or edge
    return str(uuid.uuid4())
