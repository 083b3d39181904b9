from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from jinja2 import Environment, FileSystemLoader
from pathlib import Path

from fastajoin import ScoreTableError, build_both_texts, join_maps, rows_to_frame
from fastajoin.config import COLUMN_SETS, MAX_UPLOAD_BYTES, MIN_IDENT, SELECT_POLICIES

# ========= CONFIG =========
API_TITLE = "FASTA organism join API"
TEMPLATES = Path(__file__).parent / "templates"
ALLOWED_ORIGINS = ["*"]  # or restrict later to your static site origin
# =========================

app = FastAPI(title=API_TITLE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

tmpl = Environment(loader=FileSystemLoader(str(TEMPLATES)))

async def read_upload(file: UploadFile) -> str:
    raw = await file.read()
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(413, f"{file.filename}: file too large")
    return raw.decode("utf-8", errors="replace")

@app.get("/", response_class=HTMLResponse)
def index():
    return tmpl.get_template("index.html").render(
        min_ident=MIN_IDENT, policies=SELECT_POLICIES, column_sets=sorted(COLUMN_SETS))

@app.get("/healthz")
def healthz():
    return {"ok": True}

@app.post("/merge")
async def merge(first: UploadFile = File(...), first_scores: UploadFile = File(...),
                second: UploadFile = File(...), second_scores: UploadFile = File(...),
                min_ident: float = Form(MIN_IDENT), no_threshold: bool = Form(False),
                select: str = Form("score"), columns: str = Form("full")):
    if select not in SELECT_POLICIES:
        raise HTTPException(400, f"select must be one of {list(SELECT_POLICIES)}")
    if columns not in COLUMN_SETS:
        raise HTTPException(400, f"columns must be one of {sorted(COLUMN_SETS)}")

    texts = [await read_upload(f) for f in (first, first_scores, second, second_scores)]
    opts = {"min_ident": None if no_threshold else min_ident, "select": select}

    first_side = (texts[0], texts[1], first_scores.filename or "first_scores")
    second_side = (texts[2], texts[3], second_scores.filename or "second_scores")
    # the fork-join blocks until both sides finish, so keep it off the event loop
    try:
        (m1, _), (m2, _) = await run_in_threadpool(build_both_texts, first_side, second_side, **opts)
    except ScoreTableError as e:
        raise HTTPException(422, str(e))

    df = rows_to_frame(join_maps(m1, m2), columns=columns, sort=True)
    return Response(df.to_csv(index=False), media_type="text/csv",
                    headers={"X-Shared-Organisms": str(len(df))})
