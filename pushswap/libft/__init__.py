"""Supporting character, string and linked-list helpers."""