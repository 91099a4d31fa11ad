from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
import os
import delta2pdf

app = FastAPI(title="Delta to PDF Converter API")

# Enable CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Images referenced by deltas are looked up here
IMAGE_DIR = os.environ.get("DELTA2PDF_IMAGE_DIR")


@app.post("/convert")
@app.post("/api/convert") # Support both paths
async def convert_delta(
    text: str = Form(None),
    file: UploadFile = File(None)
):
    if not text and not file:
        raise HTTPException(status_code=400, detail="No delta content provided")

    if text:
        content = text
    else:
        content = await file.read()

    try:
        pdf_bytes = delta2pdf.convert_to_bytes(content, image_dir=IMAGE_DIR)
    except (delta2pdf.ParseError, delta2pdf.ImageUrlError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except delta2pdf.SecurityError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except delta2pdf.DeltaPdfError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="document.pdf"'},
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
