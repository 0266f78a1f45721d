"""
Example: one-shot and streaming generation

Resolves a configuration from the environment, builds the matching
generator, then generates a reply and streams another.

    OPENAI_API_KEY=... python examples/generate_and_stream.py openai
"""

import asyncio
import sys

from contentgen_sdk import (
    AuthType,
    Content,
    GenerateContentConfig,
    GenerateContentParameters,
    SessionConfig,
    UnsupportedOperationError,
    create_content_generator,
    create_content_generator_config,
)
from contentgen_sdk.models import CountTokensParameters


async def main(auth_mode: str):
    session = SessionConfig(model="gpt-4o-mini" if auth_mode == "openai" else None)
    config = create_content_generator_config(session, AuthType(auth_mode))
    generator = await create_content_generator(config, session)

    request = GenerateContentParameters(
        model=config.model,
        contents=[Content.from_text("What is a haiku? Answer in one sentence.")],
        config=GenerateContentConfig(temperature=0.7, max_output_tokens=100),
    )

    print("=== Generate ===")
    response = await generator.generate_content(request)
    print(response.text)
    if response.usage_metadata:
        print(f"Tokens: {response.usage_metadata.total_token_count}")

    print("\n=== Stream ===")
    stream = await generator.generate_content_stream(
        request.model_copy(update={"contents": "Write a haiku about Python"})
    )
    async for chunk in stream:
        print(chunk.text, end="", flush=True)
    print()

    print("\n=== Count tokens ===")
    try:
        counted = await generator.count_tokens(CountTokensParameters(model=config.model, contents="Hello"))
        print(counted.total_tokens)
    except UnsupportedOperationError as e:
        print(e)


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "gemini-api-key"))
