"""Run Streamlit app from project root. Use: python run_app.py"""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
os.chdir(root)
subprocess.run([sys.executable, "-m", "streamlit", "run", os.path.join("job_scout", "app.py")], check=True)
