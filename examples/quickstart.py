"""Quickstart example for ownedchars.

This example demonstrates moving text into owning cursors, walking them
from both ends, and taking the buffer back.
"""

from ownedchars import OwnedChars, into_char_indices, into_chars

# Example 1: Characters
print("=" * 50)
print("Example 1: Characters")
print("=" * 50)

chars = into_chars("héllo")
print(list(chars))
# Output: ['h', 'é', 'l', 'l', 'o']

# Example 2: Byte offsets
print("\n" + "=" * 50)
print("Example 2: Characters with UTF-8 Byte Offsets")
print("=" * 50)

for offset, char in into_char_indices("aé€👋"):
    print(f"{offset:>2}: {char}")
# Output:
#  0: a
#  1: é
#  3: €
#  6: 👋

# Example 3: Returning an iterator from a function
print("\n" + "=" * 50)
print("Example 3: Iterator Outlives the Text's Creator")
print("=" * 50)


def greeting_chars(name: str) -> OwnedChars:
    return into_chars(f"¡Hola, {name}!")


cursor = greeting_chars("Zoë")
print(next(cursor), next(cursor))
# Output: ¡ H
print(cursor.as_str())
# Output: ola, Zoë!

# Example 4: Both ends
print("\n" + "=" * 50)
print("Example 4: Meeting in the Middle")
print("=" * 50)

cursor = into_chars("héllo")
print(next(cursor), cursor.next_back(), next(cursor), cursor.next_back())
# Output: h o é l
print(repr(cursor))
# Output: OwnedChars('l', front=3, back=4)

# Example 5: Taking the buffer back
print("\n" + "=" * 50)
print("Example 5: into_inner Returns the Full Original")
print("=" * 50)

cursor = into_chars("héllo")
next(cursor)
next(cursor)
print(cursor.as_str())
# Output: llo
print(cursor.into_inner())
# Output: héllo

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
