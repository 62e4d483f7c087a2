#!/usr/bin/env python3
"""
Invoice Photo Watcher - Automatic OCR Demo

Watches a folder for new invoice photos (e.g. synced from the shop phone)
and sends each one through the /invoices/ocr endpoint.

Usage:
    python invoice_watcher.py --watch-folder ./invoices-incoming
"""

import argparse
import base64
import json
import time
import requests
from pathlib import Path
from datetime import datetime
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

# Configuration
API_BASE_URL = "http://127.0.0.1:8000"
IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tif", ".tiff"}


class InvoicePhotoHandler(FileSystemEventHandler):
    """Handles new invoice photo events"""

    def __init__(self, watch_folder, processed_folder, error_folder, api_url=API_BASE_URL):
        self.watch_folder = Path(watch_folder)
        self.processed_folder = Path(processed_folder)
        self.error_folder = Path(error_folder)
        self.api_url = api_url
        self.processed_files = set()

        self.processed_folder.mkdir(exist_ok=True)
        self.error_folder.mkdir(exist_ok=True)

    def on_created(self, event):
        """Called when a file is created in the watched folder"""
        if event.is_directory:
            return

        file_path = Path(event.src_path)

        if file_path.suffix.lower() not in IMAGE_SUFFIXES:
            return

        if file_path in self.processed_files:
            return

        # Give the sync client a moment to finish writing
        time.sleep(1)

        if not file_path.exists():
            return

        self.processed_files.add(file_path)
        self.process_photo(file_path)

    def process_photo(self, file_path: Path):
        """Send a photo through the OCR endpoint"""
        print("\n" + "=" * 70)
        print(f"📷 NEW INVOICE PHOTO: {file_path.name}")
        print("=" * 70)
        print(f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Size: {file_path.stat().st_size:,} bytes")
        print()

        try:
            print("🔄 Sending to OCR...")
            image_base64 = base64.b64encode(file_path.read_bytes()).decode("ascii")

            response = requests.post(
                f"{self.api_url}/invoices/ocr",
                json={"imageBase64": image_base64},
                timeout=120,
            )

            if response.status_code == 200:
                self.handle_success(file_path, response.json())
            else:
                print(f"❌ API Error: {response.status_code}")
                print(f"   {response.text}")
                self.handle_error(file_path, f"API returned {response.status_code}")

        except requests.exceptions.Timeout:
            print("⏱️  Request timed out")
            self.handle_error(file_path, "Timeout")
        except (requests.exceptions.RequestException, OSError) as e:
            print(f"❌ Error: {str(e)}")
            self.handle_error(file_path, str(e))

    def handle_success(self, file_path: Path, data: dict):
        """Print the summary and file the photo away"""
        print()
        print("📊 EXTRACTION RESULTS:")
        print(f"   Supplier: {data.get('supplier') or 'N/A'}")
        print(f"   Invoice #: {data.get('invoice_number') or 'N/A'}")
        cost = data.get("cost")
        print(f"   Total: {'N/A' if cost is None else f'${cost:,.2f}'}")
        print("   Notes:")
        for line in (data.get("notes") or "").splitlines():
            print(f"     {line}")

        dest_path = self.processed_folder / file_path.name
        file_path.rename(dest_path)
        print(f"\n📁 Moved to: {dest_path}")

        self.log_processing(file_path.name, data, dest_path)
        print("=" * 70)

    def handle_error(self, file_path: Path, error_msg: str):
        """Move the photo aside for manual entry"""
        print(f"\n❌ Processing failed: {error_msg}")

        dest_path = self.error_folder / f"ERROR_{file_path.name}"
        file_path.rename(dest_path)
        print(f"📁 Moved to: {dest_path}")
        print("=" * 70)

    def log_processing(self, filename: str, data: dict, dest_path: Path):
        """Append the result to processing_log.json next to the watch folder"""
        log_file = self.watch_folder.parent / "processing_log.json"

        if log_file.exists():
            with open(log_file, "r") as f:
                log_data = json.load(f)
        else:
            log_data = []

        log_data.append({
            "timestamp": datetime.now().isoformat(),
            "filename": filename,
            "summary": data,
            "destination": str(dest_path),
        })

        with open(log_file, "w") as f:
            json.dump(log_data, f, indent=2)


def main():
    parser = argparse.ArgumentParser(
        description="Watch a folder for invoice photos and OCR them automatically"
    )
    parser.add_argument(
        "--watch-folder",
        default="./invoices-incoming",
        help="Folder to watch for new photos (default: ./invoices-incoming)",
    )
    parser.add_argument(
        "--processed-folder",
        default="./invoices-processed",
        help="Folder for photos that were OCR'd (default: ./invoices-processed)",
    )
    parser.add_argument(
        "--error-folder",
        default="./invoices-error",
        help="Folder for photos that failed (default: ./invoices-error)",
    )
    parser.add_argument(
        "--api-url",
        default=API_BASE_URL,
        help=f"API base URL (default: {API_BASE_URL})",
    )

    args = parser.parse_args()

    watch_folder = Path(args.watch_folder)
    watch_folder.mkdir(exist_ok=True)

    event_handler = InvoicePhotoHandler(
        args.watch_folder,
        args.processed_folder,
        args.error_folder,
        api_url=args.api_url,
    )
    observer = Observer()
    observer.schedule(event_handler, str(watch_folder), recursive=False)
    observer.start()

    print("=" * 70)
    print("🔍 INVOICE PHOTO WATCHER")
    print("=" * 70)
    print(f"Watching: {watch_folder.absolute()}")
    print(f"Processed → {Path(args.processed_folder).absolute()}")
    print(f"Errors → {Path(args.error_folder).absolute()}")
    print(f"API: {args.api_url}")
    print()
    print("💡 Drop invoice photos into the watch folder to process them")
    print("Press Ctrl+C to stop")
    print("=" * 70)
    print()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\n\n👋 Stopping watcher...")
        observer.stop()

    observer.join()
    print("✅ Watcher stopped")


if __name__ == "__main__":
    main()
