from typing import List

PARAGRAPH_BREAK = "\n\n"


# Split text into paragraph-aligned chunks of at most max_length characters
def split_text(text: str, max_length: int) -> List[str]:

    if max_length < 1:
        raise ValueError(f"max_length must be at least 1, got {max_length}")

    chunks: List[str] = []

    while len(text) > max_length:
        # Last paragraph break that ends within the limit
        split_at = text.rfind(PARAGRAPH_BREAK, 0, max_length)

        # No break, or a break at offset 0 (would yield an empty chunk): hard cut
        if split_at <= 0:
            split_at = max_length

        chunks.append(text[:split_at])
        text = text[split_at:]

    if text:
        chunks.append(text)

    return chunks
