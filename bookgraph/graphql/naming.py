def snake_case_to_camel_case(value):
    head, *tail = value.rstrip("_").split("_")
    return head[:1].lower() + head[1:] + "".join(
        part[:1].upper() + part[1:]
        for part in tail
    )
