import asyncio
import os

from twiliokit.client import TwilioClient
from twiliokit.config import get_settings
from twiliokit.endpoints.calls import CreateCall, CreateCallBody
from twiliokit.shared.logging import setup_logging

TO = os.getenv("SMOKE_TO_NUMBER", "+15551234567")
FROM = os.getenv("SMOKE_FROM_NUMBER", "+15557654321")
VOICE_URL = "http://demo.twilio.com/docs/voice.xml"


async def main():
    setup_logging(get_settings())

    async with TwilioClient.from_env() as client:
        body = CreateCallBody(
            to=TO,
            from_=FROM,
            url=VOICE_URL,
            status_callback=os.getenv("SMOKE_STATUS_CALLBACK"),
            status_callback_event_initiated=True,
            status_callback_event_answered=True,
        )
        endpoint = CreateCall(client.account_sid, body)

        call = await client.hit(endpoint)

    print("Call SID:", call.sid)
    print("Status:", call.status.value if call.status else None)

asyncio.run(main())
