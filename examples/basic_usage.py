#!/usr/bin/env python3
"""Basic usage example for proxchat.

This example demonstrates:
1. Inspecting the reachability table
2. Framing a chat message
3. Encoding it to block offsets
4. Calculating transmission sizes
"""

from __future__ import annotations

from proxchat import (
    ChatMessage,
    encode_chat_message,
    encoded_offsets,
    frame_packet,
    get_default_table,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("proxchat Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Reachability table...")
    table = get_default_table()
    print(f"   Offsets: {table.size}")
    print(f"   Bits per offset: {table.bit_width}")
    print(f"   Magic symbols: {table.magic_symbols}")
    print()

    print("2. Framing a chat message...")
    msg = ChatMessage(text="hello from spawn")
    framed = frame_packet(msg.prox_id, msg.to_payload())
    print(f"   Framed: {framed.hex()} ({len(framed)} bytes)")
    print()

    print("3. Encoding to offsets...")
    offsets = encode_chat_message(msg.text)
    for offset in offsets[:5]:
        print(f"   {offset.x:+d} {offset.y:+d} {offset.z:+d}")
    print(f"   ... {len(offsets)} offsets total")
    print()

    print("4. Size estimate...")
    print(f"   World actions needed: {encoded_offsets(msg)}")


if __name__ == "__main__":
    main()
