from fastapi import FastAPI
from jwcal.api.public import router as public_router

app = FastAPI(title="jwcal public api")
app.include_router(public_router)
