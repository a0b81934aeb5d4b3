class DuplicateNameError(Exception):
    def __init__(self, name: str):
        self.name = name
        self.message = f"Hotel name already exists: {name}"
        super().__init__(self.message)


class RecordNotFoundError(Exception):
    def __init__(self, record_id: str):
        self.record_id = record_id
        self.message = f"Hotel not found: {record_id}"
        super().__init__(self.message)
